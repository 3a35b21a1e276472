from __future__ import annotations

import io
import math
from pathlib import Path

import pytest

from f90namelists import read, write


DOCUMENT = {
    "run": {
        "nsteps": 100,
        "dt": 0.5,
        "restart": False,
        "title": "He said 'hi'",
        "levels": [1, 2, 3],
        "weights": [0.25, 0.5, 1.0],
        "flags": [True, False],
        "names": ["a", "b c"],
    },
    "output": {
        "path": "out/data.nc",
        "freq": 1e-05,
        "neg": -3,
        "negf": -2.5,
        "big": math.inf,
        "quoted": 'say "yes"',
    },
}


def test_round_trip_through_stream():
    text = write(io.StringIO(), DOCUMENT)
    assert read(io.StringIO(text)) == DOCUMENT


def test_round_trip_preserves_order():
    text = write(io.StringIO(), DOCUMENT)
    result = read(io.StringIO(text))
    assert list(result) == list(DOCUMENT)
    for name, group in DOCUMENT.items():
        assert list(result[name]) == list(group)


def test_round_trip_through_file(tmp_path: Path):
    path = tmp_path / "roundtrip.nml"
    write(path, DOCUMENT)
    assert read(path) == DOCUMENT


def test_repetition_and_promotion_survive():
    document = read(io.StringIO("&a\n x = 3*2\n y = 1 2.5 3\n/"))
    assert read(io.StringIO(write(io.StringIO(), document))) == document


def test_model_file(data_dir: Path):
    document = read(data_dir / "model.nml")
    assert list(document) == ["time_control", "physics"]
    assert document["time_control"] == {
        "run_days": 1,
        "run_hours": 12,
        "start_year": [2024, 2024],
        "history_interval": [60, 60, 180],
        "restart": False,
        "output_dir": "./output",
    }
    assert document["physics"] == {
        "mp_physics": 8,
        "radt": 30.0,
        "cu_physics": [1, 1, 0],
        "sf_sfclay_physics": 1,
        "scheme_name": "thompson",
    }


def test_legacy_file(data_dir: Path):
    document = read(data_dir / "legacy.nml")
    assert document == {
        "inputs": {"nx": 64, "ny": 32, "gamma": 1.4, "title": "legacy 'dollar' form", "use_mpi": True},
        "extra": {"tol": 1e-8},
    }


def test_strings_file(data_dir: Path):
    document = read(data_dir / "strings.nml")
    assert document == {"strings": {"greeting": "hello", "quoted": 'say "yes"', "path": "/usr/local"}}


@pytest.mark.parametrize("name", ["model.nml", "legacy.nml", "strings.nml"])
def test_data_files_round_trip(data_dir: Path, tmp_path: Path, name: str):
    document = read(data_dir / name)
    assert document
    written = tmp_path / name
    text = write(written, document)
    assert text
    assert read(written) == document
