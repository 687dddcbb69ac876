# -*- coding: utf-8 -*-
"""Parsing of the delimited translation table into a row/column grid."""
from __future__ import annotations

import os
from typing import List

from infra.config import DEFAULT_DELIMITER, PLACEHOLDERS, TABLE_ENCODING

Rows = List[List[str]]


class RaggedRowError(ValueError):
    """A table row does not have as many columns as the first row."""

    def __init__(self, line_number: int, expected: int, actual: int):
        self.line_number = line_number
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Line {line_number}: expected {expected} columns, got {actual}"
        )


def parse(raw_text: str, delimiter: str = DEFAULT_DELIMITER) -> Rows:
    """
    Splits ``raw_text`` into rows and cells.

    Lines end at ``\\n`` only; each is trimmed (dropping a ``\\r``) before
    splitting on ``delimiter``. Cells are kept as-is, placeholders included.
    Blank lines are skipped. The first row fixes the column count and any
    other row must match it.
    """
    if not delimiter:
        raise ValueError("Delimiter must not be empty.")

    rows: Rows = []
    width = 0
    for line_number, line in enumerate(raw_text.split("\n"), start=1):
        line = line.strip()
        if not line:
            continue
        cells = line.split(delimiter)
        if not rows:
            width = len(cells)
        elif len(cells) != width:
            raise RaggedRowError(line_number, width, len(cells))
        rows.append(cells)
    return rows


def decode_placeholders(cell: str) -> str:
    """``a<semicolon>b<newline>c`` -> ``a;b\\nc``"""
    for placeholder, text in PLACEHOLDERS:
        cell = cell.replace(placeholder, text)
    return cell


def load_table(path: str, delimiter: str = DEFAULT_DELIMITER, encoding: str = TABLE_ENCODING) -> Rows:
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Translation table not found: {path}"
        )
    with open(path, "r", encoding=encoding, newline="") as fp:
        return parse(fp.read(), delimiter)
