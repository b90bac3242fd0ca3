#!/usr/bin/env python3
"""
ex01_place

Places the letters A..Z on a 10x10 grid using the base-2 sequence for the
column and the base-3 sequence for the row, then prints the grid.
"""
import string
import sys
from pathlib import Path


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def place(letters: str = string.ascii_uppercase, size: int = 10):
    from halton import Sequence

    grid = [["."] * size for _ in range(size)]
    for x, y, c in zip(Sequence(2), Sequence(3), letters):
        grid[int(y * size)][int(x * size)] = c
    return grid


def main():
    ensure_repo_on_path()
    for row in place():
        print(" ".join(row))


if __name__ == "__main__":
    main()
