# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import math
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any

import pandas as pd
from sklearn.dummy import DummyClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline

from ..console import MLConsole
from ..evaluation.evaluate import binary_metrics, binary_report, multiclass_metrics, multiclass_report
from ..features import FEATURE_COLUMNS, build_featurizer, enrich_dataframe
from ..inference.predictor import BINARY, MULTICLASS, ToxicityPredictor, positive_proba
from ..labels import CATEGORIES, DISPLAY_NAMES, pack_frame
from ..schemas import DatasetError

DEFAULT_TEST_FRACTION = 0.2
DEFAULT_SEED = 42
DEFAULT_MAX_ITER = 1000


def _iso_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


def split_dataset(
    df: pd.DataFrame,
    *,
    test_fraction: float = DEFAULT_TEST_FRACTION,
    seed: int = DEFAULT_SEED,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must be between 0 and 1, got {test_fraction}")
    holdout_rows = math.ceil(len(df) * test_fraction)
    if holdout_rows < 1 or len(df) - holdout_rows < 1:
        raise DatasetError(f"Dataset too small to split: {len(df)} rows with test_fraction={test_fraction}")
    train, holdout = train_test_split(df, test_size=test_fraction, random_state=seed)
    return train.reset_index(drop=True), holdout.reset_index(drop=True)


def _build_classifier(y_train: pd.Series, *, max_iter: int) -> LogisticRegression | DummyClassifier:
    if y_train.nunique() < 2:
        return DummyClassifier(strategy="prior")
    return LogisticRegression(max_iter=max_iter, solver="lbfgs")


def _split_metadata(train_df: pd.DataFrame, holdout_df: pd.DataFrame, strategy: str) -> dict[str, Any]:
    return {
        "strategy": strategy,
        "categories": list(CATEGORIES),
        "train_rows": int(len(train_df)),
        "holdout_rows": int(len(holdout_df)),
        "created_at_utc": _iso_now(),
        "features": list(FEATURE_COLUMNS),
    }


def train_binary_models(
    train_df: pd.DataFrame,
    holdout_df: pd.DataFrame,
    *,
    console: MLConsole,
    max_iter: int = DEFAULT_MAX_ITER,
) -> dict[str, Any]:
    """Fit one yes/no classifier per category over a shared featurizer."""
    enriched_train = enrich_dataframe(train_df)
    enriched_hold = enrich_dataframe(holdout_df)

    featurizer = build_featurizer()
    x_train = featurizer.fit_transform(enriched_train[FEATURE_COLUMNS])
    x_hold = featurizer.transform(enriched_hold[FEATURE_COLUMNS])

    models: dict[str, Pipeline] = {}
    metrics: dict[str, dict[str, float]] = {}
    for name in CATEGORIES:
        label = DISPLAY_NAMES[name]
        console.line(f"Training for {label}")
        y_train = train_df[name].astype(int)
        clf = _build_classifier(y_train, max_iter=max_iter)
        if isinstance(clf, DummyClassifier):
            console.warn(f"{label}: training split holds a single class, predicting the prior")
        clf.fit(x_train, y_train)

        scores = binary_metrics(holdout_df[name].astype(bool), positive_proba(clf, x_hold))
        console.metrics_table(binary_report(scores), title=label)
        metrics[name] = asdict(scores)
        models[name] = Pipeline(steps=[("preprocessor", featurizer), ("clf", clf)])

    metadata = _split_metadata(train_df, holdout_df, BINARY)
    metadata["metrics"] = metrics
    return {
        "predictor": ToxicityPredictor(strategy=BINARY, models=models, metadata=metadata),
        "metrics": metrics,
        "metadata": metadata,
    }


def train_multiclass_model(
    train_df: pd.DataFrame,
    holdout_df: pd.DataFrame,
    *,
    console: MLConsole,
    max_iter: int = DEFAULT_MAX_ITER,
) -> dict[str, Any]:
    """Fit a single maximum-entropy classifier over the packed label."""
    enriched_train = enrich_dataframe(train_df)
    enriched_hold = enrich_dataframe(holdout_df)
    y_train = pack_frame(train_df)
    y_hold = pack_frame(holdout_df)

    clf = _build_classifier(y_train, max_iter=max_iter)
    if isinstance(clf, DummyClassifier):
        console.warn("training split holds a single packed label, predicting the prior")
    model = Pipeline(steps=[("preprocessor", build_featurizer()), ("clf", clf)])

    console.progress("Training model...")
    model.fit(enriched_train[FEATURE_COLUMNS], y_train)
    console.done()

    console.line("Evaluating model")
    proba = model.predict_proba(enriched_hold[FEATURE_COLUMNS])
    scores = multiclass_metrics(y_hold, proba, model.classes_)
    console.metrics_table(multiclass_report(scores), title="Evaluation metrics")

    metadata = _split_metadata(train_df, holdout_df, MULTICLASS)
    metadata["classes"] = [int(value) for value in model.classes_]
    metadata["metrics"] = asdict(scores)
    return {
        "predictor": ToxicityPredictor(strategy=MULTICLASS, models={MULTICLASS: model}, metadata=metadata),
        "metrics": asdict(scores),
        "metadata": metadata,
    }
