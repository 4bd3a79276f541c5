from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from gravity_clusters.__main__ import main


SCENARIOS = Path(__file__).resolve().parents[1] / "examples" / "scenarios"


def test_cli_runs_scenario(capsys: pytest.CaptureFixture[str]) -> None:
    code = main([str(SCENARIOS / "sun_earth_v1.json"), "--steps", "10"])
    out = capsys.readouterr().out
    assert code == 0
    assert "steps: 10" in out
    assert "clusters: 2" in out
    assert "Earth" in out


def test_cli_saves_samples(tmp_path: Path) -> None:
    out = tmp_path / "samples.npz"
    code = main([str(SCENARIOS / "sun_earth_v1.json"), "--steps", "120", "--out", str(out)])
    assert code == 0
    data = np.load(out)
    assert data["pos"].shape == (3, 2, 3)
    assert list(data["step"]) == [0, 60, 120]
    assert list(data["names"]) == ["Sun", "Earth"]


def test_cli_ephemeris_day_override(capsys: pytest.CaptureFixture[str]) -> None:
    code = main([
        str(SCENARIOS / "inner_system_2022_v1.json"),
        "--steps", "2",
        "--day", "2022-Jan-02",
    ])
    assert code == 0
    assert "clusters: 3" in capsys.readouterr().out


def test_cli_reports_load_errors(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 2
    code = main([str(SCENARIOS / "inner_system_2022_v1.json"), "--day", "1999-Jan-01"])
    assert code == 2


@pytest.mark.parametrize(
    "extra",
    [["--steps", "-1"], ["--steps", "ten"], ["--log-level", "LOUD"]],
)
def test_cli_rejects_bad_options(extra: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(SCENARIOS / "sun_earth_v1.json"), *extra])
    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err


def test_cli_log_level_is_case_insensitive() -> None:
    assert main([str(SCENARIOS / "sun_earth_v1.json"), "--steps", "0", "--log-level", "debug"]) == 0


def test_cli_reports_invalid_body_fields(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(
        '{"schema_version": 1, "simulation": {"steps": 1},'
        ' "bodies": [{"name": "a", "mass": null, "radius": 1.0}]}',
        encoding="utf-8",
    )
    assert main([str(path)]) == 2
