# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd

from ..labels import CATEGORIES
from ..schemas import DatasetError, LabeledComment, TestComment

TRAINING_COLUMNS = ["id", "comment_text", *CATEGORIES]
TEST_COLUMNS = ["id", "comment_text"]

TRUE_WORDS = {"true", "t", "yes", "y", "1", "+1"}
FALSE_WORDS = {"false", "f", "no", "n", "0", "-1", ""}


def parse_bool(value: object) -> bool:
    text = str(value if value is not None else "").strip().lower()
    if text in TRUE_WORDS:
        return True
    if text in FALSE_WORDS:
        return False
    raise DatasetError(f"Not a boolean value: {value!r}")


def _read_tsv(path: Path) -> pd.DataFrame:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    try:
        # header=0 consumes the first line whatever it contains
        return pd.read_csv(
            path,
            sep="\t",
            header=0,
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError as exc:
        raise DatasetError(f"{path}: file is empty") from exc
    except pd.errors.ParserError as exc:
        raise DatasetError(f"{path}: malformed tab-separated data ({exc})") from exc


def _first_short_line(path: Path, required: int) -> int | None:
    # pandas pads short rows with "" under dtype=str, so count the tabs directly
    with path.open(encoding="utf-8") as handle:
        for number, raw in enumerate(handle, 1):
            line = raw.rstrip("\r\n")
            if number == 1 or not line:
                continue
            if line.count("\t") + 1 < required:
                return number
    return None


def _positional(frame: pd.DataFrame, columns: list[str], path: Path) -> pd.DataFrame:
    if len(frame.columns) < len(columns):
        raise DatasetError(f"{path}: expected at least {len(columns)} columns, found {len(frame.columns)}")
    short = _first_short_line(path, len(columns))
    if short is not None:
        raise DatasetError(f"{path}: line {short} has fewer than {len(columns)} fields")
    out = frame.iloc[:, : len(columns)].copy()
    out.columns = columns
    return out.reset_index(drop=True)


def read_training_file(path: Path) -> pd.DataFrame:
    """Load ``train.tsv``: id, comment text and the six category flags."""
    path = Path(path)
    frame = _positional(_read_tsv(path), TRAINING_COLUMNS, path)
    if frame.empty:
        raise DatasetError(f"{path}: no training rows")
    for name in CATEGORIES:
        try:
            frame[name] = frame[name].map(parse_bool).astype(bool)
        except DatasetError as exc:
            raise DatasetError(f"{path}: column {name}: {exc}") from exc
    return frame


def read_test_file(path: Path) -> pd.DataFrame:
    path = Path(path)
    return _positional(_read_tsv(path), TEST_COLUMNS, path)


def load_training_samples(path: Path) -> list[LabeledComment]:
    frame = read_training_file(path)
    return [LabeledComment(**row) for row in frame.to_dict(orient="records")]


def load_test_samples(path: Path) -> list[TestComment]:
    frame = read_test_file(path)
    return [TestComment(id=str(row["id"]), comment_text=str(row["comment_text"])) for row in frame.to_dict(orient="records")]
