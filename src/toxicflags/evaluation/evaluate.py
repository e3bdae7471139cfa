# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from sklearn.metrics import (
    accuracy_score,
    average_precision_score,
    balanced_accuracy_score,
    f1_score,
    log_loss,
    precision_score,
    recall_score,
    roc_auc_score,
)

from ..schemas import BinaryMetrics, MulticlassMetrics


def _finite(value: float) -> float:
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):  # NaN / inf
        return 0.0
    return value


def _safe_auc(y_true: np.ndarray, y_prob: np.ndarray) -> float:
    if len(np.unique(y_true)) < 2:
        return 0.0
    return _finite(roc_auc_score(y_true, y_prob))


def _safe_auprc(y_true: np.ndarray, y_prob: np.ndarray) -> float:
    if not y_true.any():
        return 0.0
    return _finite(average_precision_score(y_true, y_prob))


def _reduction(loss: float, prior_loss: float) -> float:
    if prior_loss <= 1e-12:
        return 0.0
    return _finite(1.0 - loss / prior_loss)


def binary_metrics(y_true: Sequence[bool], y_prob: Sequence[float], threshold: float = 0.5) -> BinaryMetrics:
    """Score positive-class probabilities against boolean ground truth."""
    truth = np.asarray(y_true, dtype=int)
    probs = np.clip(np.asarray(y_prob, dtype=float), 1e-15, 1 - 1e-15)
    if truth.size == 0:
        raise ValueError("binary_metrics needs at least one row")
    preds = (probs >= threshold).astype(int)

    loss = _finite(log_loss(truth, probs, labels=[0, 1]))
    base_rate = float(truth.mean())
    prior = np.full(truth.shape, min(max(base_rate, 1e-15), 1 - 1e-15))
    prior_loss = _finite(log_loss(truth, prior, labels=[0, 1])) if 0.0 < base_rate < 1.0 else 0.0

    return BinaryMetrics(
        accuracy=float(accuracy_score(truth, preds)),
        auc=_safe_auc(truth, probs),
        auprc=_safe_auprc(truth, probs),
        f1_score=float(f1_score(truth, preds, zero_division=0)),
        log_loss=loss,
        log_loss_reduction=_reduction(loss, prior_loss),
        positive_precision=float(precision_score(truth, preds, pos_label=1, zero_division=0)),
        positive_recall=float(recall_score(truth, preds, pos_label=1, zero_division=0)),
        negative_precision=float(precision_score(truth, preds, pos_label=0, zero_division=0)),
        negative_recall=float(recall_score(truth, preds, pos_label=0, zero_division=0)),
    )


def multiclass_metrics(y_true: Sequence[int], proba: np.ndarray, classes: Sequence[int]) -> MulticlassMetrics:
    """Accuracy and log-loss figures for the packed-label classifier.

    ``proba`` holds one column per entry of ``classes``. Holdout labels that
    never appeared in training count as misses for the accuracies but are left
    out of the log loss, which has no probability column for them.
    """
    truth = np.asarray(y_true, dtype="int64")
    class_array = np.asarray(classes, dtype="int64")
    probabilities = np.asarray(proba, dtype=float)
    if truth.size == 0:
        raise ValueError("multiclass_metrics needs at least one row")
    preds = class_array[probabilities.argmax(axis=1)]

    known = np.isin(truth, class_array)
    loss = 0.0
    prior_loss = 0.0
    if known.any():
        known_truth = truth[known]
        if len(class_array) == 1:
            loss = 0.0
        else:
            loss = _finite(log_loss(known_truth, probabilities[known], labels=class_array))
            frequencies = np.array([(known_truth == value).mean() for value in class_array])
            prior = np.tile(np.clip(frequencies, 1e-15, 1.0), (len(known_truth), 1))
            prior = prior / prior.sum(axis=1, keepdims=True)
            prior_loss = _finite(log_loss(known_truth, prior, labels=class_array))

    return MulticlassMetrics(
        micro_accuracy=float(accuracy_score(truth, preds)),
        macro_accuracy=_finite(balanced_accuracy_score(truth, preds)),
        log_loss=loss,
        log_loss_reduction=_reduction(loss, prior_loss),
    )


def binary_report(metrics: BinaryMetrics) -> dict[str, str]:
    return {
        "Accuracy": f"{metrics.accuracy:.2%}",
        "Auc": f"{metrics.auc:.2%}",
        "Auprc": f"{metrics.auprc:.2%}",
        "F1Score": f"{metrics.f1_score:.2%}",
        "LogLoss": f"{metrics.log_loss:.2f}",
        "LogLossReduction": f"{metrics.log_loss_reduction:.2f}",
        "PositivePrecision": f"{metrics.positive_precision:.2f}",
        "PositiveRecall": f"{metrics.positive_recall:.2f}",
        "NegativePrecision": f"{metrics.negative_precision:.2f}",
        "NegativeRecall": f"{metrics.negative_recall:.2f}",
    }


def multiclass_report(metrics: MulticlassMetrics) -> dict[str, str]:
    return {
        "MicroAccuracy": f"{metrics.micro_accuracy:.3f}",
        "MacroAccuracy": f"{metrics.macro_accuracy:.3f}",
        "LogLoss": f"{metrics.log_loss:.3f}",
        "LogLossReduction": f"{metrics.log_loss_reduction:.3f}",
    }
