# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Any

import joblib
import numpy as np
import pandas as pd

from ..features import FEATURE_COLUMNS, enrich_dataframe
from ..labels import CATEGORIES, unpack_series
from ..schemas import CategoryCounts, CommentFlags, TestComment, ToxicFlagsError

BINARY = "binary"
MULTICLASS = "multiclass"
STRATEGIES = (BINARY, MULTICLASS)


def positive_proba(model: Any, x: Any) -> np.ndarray:
    """Probability of class 1, or zeros when the model never saw it."""
    proba = model.predict_proba(x)
    classes = [int(value) for value in model.classes_]
    if 1 not in classes:
        return np.zeros(proba.shape[0])
    return proba[:, classes.index(1)]


class ToxicityPredictor:
    def __init__(self, *, strategy: str, models: dict[str, Any], metadata: dict[str, Any] | None = None) -> None:
        if strategy not in STRATEGIES:
            raise ToxicFlagsError(f"Unknown strategy: {strategy}")
        expected = set(CATEGORIES) if strategy == BINARY else {MULTICLASS}
        if set(models) != expected:
            raise ToxicFlagsError(f"{strategy} predictor needs models for {sorted(expected)}")
        self.strategy = strategy
        self.models = models
        self.metadata: dict[str, Any] = dict(metadata or {})

    def _flag_frame(self, frame: pd.DataFrame) -> pd.DataFrame:
        if frame.empty:
            return pd.DataFrame({name: pd.Series(dtype=bool) for name in CATEGORIES})
        x = enrich_dataframe(frame)[FEATURE_COLUMNS]
        if self.strategy == BINARY:
            return self._binary_flags(x)
        return unpack_series(self.models[MULTICLASS].predict(x))

    def _binary_flags(self, x: pd.DataFrame) -> pd.DataFrame:
        preprocessors = [getattr(self.models[name], "named_steps", {}).get("preprocessor") for name in CATEGORIES]
        shared = preprocessors[0]
        if shared is None or any(step is not shared for step in preprocessors):
            return pd.DataFrame({name: self.models[name].predict(x).astype(int) == 1 for name in CATEGORIES})
        # trained binary pipelines share one fitted featurizer
        matrix = shared.transform(x)
        return pd.DataFrame(
            {name: self.models[name].named_steps["clf"].predict(matrix).astype(int) == 1 for name in CATEGORIES}
        )

    def predict(self, texts: Sequence[str]) -> list[CommentFlags]:
        frame = pd.DataFrame({"comment_text": list(texts)})
        flags = self._flag_frame(frame)
        return [CommentFlags(**{name: bool(row[name]) for name in CATEGORIES}) for _idx, row in flags.iterrows()]

    def score_frame(self, frame: pd.DataFrame) -> CategoryCounts:
        flags = self._flag_frame(frame)
        counts = CategoryCounts(rows=int(len(frame)))
        for name in CATEGORIES:
            setattr(counts, name, int(flags[name].sum()))
        return counts

    def flagged(self, frame: pd.DataFrame) -> Iterator[tuple[TestComment, CommentFlags]]:
        flags = self._flag_frame(frame)
        for position, row in enumerate(flags.to_dict(orient="records")):
            result = CommentFlags(**{name: bool(row[name]) for name in CATEGORIES})
            if not result.any():
                continue
            source = frame.iloc[position]
            yield TestComment(id=str(source["id"]), comment_text=str(source["comment_text"])), result

    def save(self, model_dir: Path) -> dict[str, str]:
        model_dir = Path(model_dir)
        model_dir.mkdir(parents=True, exist_ok=True)
        model_path = model_dir / "model.joblib"
        metadata_path = model_dir / "metadata.json"
        joblib.dump({"strategy": self.strategy, "models": self.models}, model_path)
        metadata = dict(self.metadata)
        metadata["strategy"] = self.strategy
        metadata_path.write_text(json.dumps(metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        return {"model": str(model_path), "metadata": str(metadata_path)}

    @classmethod
    def load(cls, model_dir: Path) -> ToxicityPredictor:
        model_dir = Path(model_dir)
        model_path = model_dir / "model.joblib"
        if not model_path.exists():
            raise FileNotFoundError(f"No saved model at {model_path}")
        payload = joblib.load(model_path)
        metadata: dict[str, Any] = {}
        metadata_path = model_dir / "metadata.json"
        if metadata_path.exists():
            metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
        return cls(strategy=payload["strategy"], models=payload["models"], metadata=metadata)
