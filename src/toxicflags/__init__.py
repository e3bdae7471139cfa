# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Toxic comment classification: six binary models or one packed-label model."""

from .inference.predictor import ToxicityPredictor
from .labels import CATEGORIES, pack_labels, unpack_label
from .schemas import CategoryCounts, CommentFlags, DatasetError, LabeledComment, TestComment, ToxicFlagsError

__all__ = [
    "CATEGORIES",
    "CategoryCounts",
    "CommentFlags",
    "DatasetError",
    "LabeledComment",
    "TestComment",
    "ToxicFlagsError",
    "ToxicityPredictor",
    "pack_labels",
    "unpack_label",
]
