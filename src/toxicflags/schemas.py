# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass


class ToxicFlagsError(Exception):
    """Base error for the toxicflags package."""


class DatasetError(ToxicFlagsError, ValueError):
    """Raised when an input file does not match the expected layout."""


@dataclass(slots=True)
class LabeledComment:
    id: str
    comment_text: str
    toxic: bool = False
    severe_toxic: bool = False
    obscene: bool = False
    threat: bool = False
    insult: bool = False
    identity_hate: bool = False


@dataclass(slots=True)
class TestComment:
    __test__ = False  # keep pytest from collecting this as a test class

    id: str
    comment_text: str


@dataclass(slots=True)
class CommentFlags:
    toxic: bool = False
    severe_toxic: bool = False
    obscene: bool = False
    threat: bool = False
    insult: bool = False
    identity_hate: bool = False

    def any(self) -> bool:
        return any(asdict(self).values())


@dataclass(slots=True)
class CategoryCounts:
    rows: int = 0
    toxic: int = 0
    severe_toxic: int = 0
    obscene: int = 0
    threat: int = 0
    insult: int = 0
    identity_hate: int = 0


@dataclass(slots=True)
class BinaryMetrics:
    accuracy: float
    auc: float
    auprc: float
    f1_score: float
    log_loss: float
    log_loss_reduction: float
    positive_precision: float
    positive_recall: float
    negative_precision: float
    negative_recall: float


@dataclass(slots=True)
class MulticlassMetrics:
    micro_accuracy: float
    macro_accuracy: float
    log_loss: float
    log_loss_reduction: float
