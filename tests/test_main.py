from __future__ import annotations

from pathlib import Path

import pytest

from f90namelists import read
from f90namelists.main import main


def test_writes_normalized_files(data_dir: Path, tmp_path: Path):
    out = tmp_path / "out"
    main([str(data_dir / "legacy.nml"), "-o", str(out)])
    written = out / "legacy.nml"
    assert written.read_text().startswith("&inputs\nnx = 64\n")
    assert read(written) == read(data_dir / "legacy.nml")


def test_prints_to_stdout(data_dir: Path, capsys):
    main([str(data_dir / "strings.nml"), "--indent", "  "])
    captured = capsys.readouterr()
    assert captured.out == "&strings\n  greeting = 'hello'\n  quoted = 'say \"yes\"'\n  path = '/usr/local'\n/\n"


def test_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.nml")])
