"""Compact encoding of board cells.

Each cell is the 9-field list ``[owner, power, capacity, left, up_left,
up_right, right, bottom_right, bottom_left]``. Trailing zeros carry no
information, so the encoder strips them:

    [0,0,8,1,1,0,0,0,0]  ->  [0,0,8,1,1]
    [0,0,0,0,0,0,0,0,0]  ->  []            (hole)

Receivers right-pad every cell with zeros back to 9 fields before use.
"""

from __future__ import annotations

import json
from typing import List, Sequence, Union

CELL_WIDTH = 9

Rows = List[List[List[int]]]


def compress_cell(cell: Sequence[int]) -> List[int]:
    """Return ``cell`` with its trailing zero fields removed."""
    out = list(cell)
    while out and out[-1] == 0:
        out.pop()
    return out


def decompress_cell(cell: Sequence[int]) -> List[int]:
    """Right-pad a compressed cell with zeros to the full 9 fields.

    Raises:
        ValueError: if the sequence is longer than a full cell.
    """
    if len(cell) > CELL_WIDTH:
        raise ValueError(f"cell has {len(cell)} fields, at most {CELL_WIDTH} allowed")
    return [int(v) for v in cell] + [0] * (CELL_WIDTH - len(cell))


def compress_grid(rows: Sequence[Sequence[Sequence[int]]]) -> Rows:
    return [[compress_cell(cell) for cell in row] for row in rows]


def decompress_grid(data: Union[str, Sequence[Sequence[Sequence[int]]]]) -> Rows:
    """Inverse of :func:`compress_grid`; accepts JSON text or nested lists."""
    if isinstance(data, str):
        data = json.loads(data)
    return [[decompress_cell(cell) for cell in row] for row in data]


__all__ = ["CELL_WIDTH", "compress_cell", "decompress_cell", "compress_grid", "decompress_grid"]
