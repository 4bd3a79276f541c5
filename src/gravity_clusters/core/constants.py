"""Physical constants (SI units)."""

G = 6.674e-11  # m^3 kg^-1 s^-2

# Tolerance used when comparing body masses for equality.
MASS_EPSILON = 1e-7

# Scale applied to log10(radius) to obtain the on-screen dot radius.
VISUAL_RADIUS_SCALE = 1e9
