"""CLI for normalizing Fortran namelist files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable

from f90namelists.formatter import NamelistFormatter
from f90namelists.parser import NamelistReader


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Read Fortran namelist files and write them back in normalized form."
    )
    parser.add_argument("inputs", nargs="+", help="Namelist files to normalize.")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory where normalized files should be written (defaults to stdout).",
    )
    parser.add_argument(
        "--indent",
        default="",
        help="Characters to put in front of each variable line (default: none).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each interpreted line.")
    return parser.parse_args(argv)


def collect_inputs(paths: Iterable[str]) -> list[Path]:
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if not path.is_file():
            raise FileNotFoundError(f"Input path does not exist: {path}")
        files.append(path)
    return files


def normalize(files: Iterable[Path], output_dir: Path | None, indent: str, verbose: bool) -> None:
    reader = NamelistReader(config={"enable_logger": verbose})
    formatter = NamelistFormatter(indent=indent, config={"enable_logger": verbose})
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
    for source in files:
        document = reader.read(source)
        if output_dir is None:
            formatter.write(sys.stdout, document)
            sys.stdout.write("\n")
            continue
        destination = output_dir / source.name
        formatter.write(destination, document)
        print(f"Wrote {destination}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    files = collect_inputs(args.inputs)
    output_dir = Path(args.output_dir) if args.output_dir else None
    normalize(files, output_dir, indent=args.indent, verbose=args.verbose)


if __name__ == "__main__":
    main()
