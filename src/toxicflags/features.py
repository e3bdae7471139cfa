# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
from collections import Counter

import pandas as pd
from sklearn.compose import ColumnTransformer
from sklearn.feature_extraction.text import TfidfVectorizer

WHITESPACE_RE = re.compile(r"\s+")
TOKEN_RE = re.compile(r"[a-z0-9à-öø-ÿ_'-]{3,40}", flags=re.IGNORECASE)

TEXT_COLUMN = "text"
FEATURE_COLUMNS = [TEXT_COLUMN]


def _safe_text(value: object) -> str:
    if value is None or (isinstance(value, float) and value != value):
        return ""
    return str(value)


def normalize_comment(value: object) -> str:
    return WHITESPACE_RE.sub(" ", _safe_text(value)).strip()


def enrich_dataframe(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    if "comment_text" not in out.columns:
        out["comment_text"] = ""
    out["comment_text"] = out["comment_text"].map(_safe_text)
    out[TEXT_COLUMN] = out["comment_text"].map(normalize_comment)
    return out


def build_featurizer(*, max_word_features: int = 60000, max_char_features: int = 40000) -> ColumnTransformer:
    """Word and character TF-IDF blocks over the normalised comment text."""
    return ColumnTransformer(
        transformers=[
            (
                "word_tfidf",
                TfidfVectorizer(analyzer="word", ngram_range=(1, 2), max_features=max_word_features, sublinear_tf=True),
                TEXT_COLUMN,
            ),
            (
                "char_tfidf",
                TfidfVectorizer(analyzer="char_wb", ngram_range=(3, 5), max_features=max_char_features, sublinear_tf=True),
                TEXT_COLUMN,
            ),
        ],
        sparse_threshold=1.0,
    )


def top_tokens(text: str, max_items: int = 5) -> list[str]:
    tokens = [match.group(0).lower() for match in TOKEN_RE.finditer(normalize_comment(text))]
    if not tokens:
        return []
    freq = Counter(tokens)
    return [token for token, _count in freq.most_common(max_items)]
