# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Toxicity categories and the bit-packed label used by the multiclass model.

Each category owns one bit of a small integer, toxic at bit 6 down to
identity_hate at bit 1. Bit 0 is never set.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
import pandas as pd

CATEGORIES: tuple[str, ...] = (
    "toxic",
    "severe_toxic",
    "obscene",
    "threat",
    "insult",
    "identity_hate",
)

CATEGORY_BITS: dict[str, int] = {
    "toxic": 6,
    "severe_toxic": 5,
    "obscene": 4,
    "threat": 3,
    "insult": 2,
    "identity_hate": 1,
}

DISPLAY_NAMES: dict[str, str] = {
    "toxic": "Toxic",
    "severe_toxic": "Severe Toxic",
    "obscene": "Obscene",
    "threat": "Threat",
    "insult": "Insult",
    "identity_hate": "Identity Hate",
}


def _flag(flags: Mapping[str, Any] | object, name: str) -> bool:
    if isinstance(flags, Mapping):
        return bool(flags.get(name, False))
    return bool(getattr(flags, name, False))


def pack_labels(flags: Mapping[str, Any] | object) -> int:
    """Fold the six category flags of a record or mapping into one integer."""
    packed = 0
    for name in CATEGORIES:
        if _flag(flags, name):
            packed += 1 << CATEGORY_BITS[name]
    return packed


def unpack_label(packed: int) -> dict[str, bool]:
    value = int(packed)
    return {name: (value & (1 << CATEGORY_BITS[name])) != 0 for name in CATEGORIES}


def pack_frame(frame: pd.DataFrame) -> pd.Series:
    packed = pd.Series(0, index=frame.index, dtype="int64")
    for name in CATEGORIES:
        packed += frame[name].astype(bool).astype("int64") * (1 << CATEGORY_BITS[name])
    return packed


def unpack_series(values: Iterable[int]) -> pd.DataFrame:
    array = np.asarray(list(values), dtype="int64")
    return pd.DataFrame({name: (array & (1 << CATEGORY_BITS[name])) != 0 for name in CATEGORIES})
