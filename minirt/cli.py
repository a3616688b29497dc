"""Command-line entry point: check and read a ``.rt`` scene file."""

from __future__ import annotations

import sys
from typing import Sequence

from minirt.scene import SceneError, read_scene

_EXIT_FAILURE = 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read the scene named on the command line and report whether it parses."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        sys.stderr.write("Invalid number of arguments !\n")
        return _EXIT_FAILURE
    path = args[0]
    if not path.endswith(".rt"):
        sys.stderr.write("Invalid format !\n")
        return _EXIT_FAILURE
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        sys.stderr.write(f"{path}: {exc.strerror or exc}\n")
        sys.stderr.write("Invalid file !\n")
        return _EXIT_FAILURE
    try:
        read_scene(text)
    except SceneError:
        sys.stdout.write("\x1b[1;31mParsing Error !\n")
        return _EXIT_FAILURE
    sys.stdout.write("\x1b[1;32mParsing Success !\n")
    # Rendering is not wired up yet, so the run still ends unsuccessfully.
    return _EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())