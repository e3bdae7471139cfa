# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from toxicflags.console import MLConsole
from toxicflags.labels import CATEGORIES

TRAIN_HEADER = "id\tcomment_text\ttoxic\tsevere_toxic\tobscene\tthreat\tinsult\tidentity_hate"

CLEAN_TEXTS = [
    "Thanks for fixing the references on this article",
    "I agree with the proposed merge of these two pages",
    "Could you add a source for the population figure?",
    "The infobox looks much better after your edit",
    "Please see the talk page before reverting again",
    "Nice work on the history section, very readable",
    "I moved the photo gallery to the bottom of the page",
    "Welcome to the project, let me know if you need help",
    "The citation format follows the manual of style now",
    "This date conflicts with the one given in the lead",
]

# (text, toxic, severe_toxic, obscene, threat, insult, identity_hate)
TOXIC_ROWS = [
    ("You are a stupid idiot and nobody likes you", 1, 0, 0, 0, 1, 0),
    ("Shut up you worthless idiot", 1, 0, 0, 0, 1, 0),
    ("I will find you and kill you", 1, 0, 0, 1, 0, 0),
    ("Go to hell you filthy moron", 1, 0, 1, 0, 1, 0),
    ("What a damn stupid crap edit", 1, 0, 1, 0, 0, 0),
    ("You disgusting pig I hope you die", 1, 1, 1, 1, 1, 0),
    ("People like you and your whole group are vermin", 1, 0, 0, 0, 1, 1),
    ("Idiot idiot idiot stop editing", 1, 0, 0, 0, 1, 0),
]


def _bool_text(value: int, index: int) -> str:
    # alternate spellings the reader must accept
    if index % 2:
        return "True" if value else "False"
    return "1" if value else "0"


def training_lines(repeat: int = 3) -> list[str]:
    lines = [TRAIN_HEADER]
    index = 0
    for round_no in range(repeat):
        for text in CLEAN_TEXTS:
            flags = "\t".join(_bool_text(0, index) for _ in CATEGORIES)
            lines.append(f"c{round_no}_{index}\t{text}\t{flags}")
            index += 1
        for text, *values in TOXIC_ROWS:
            flags = "\t".join(_bool_text(value, index) for value in values)
            lines.append(f"t{round_no}_{index}\t{text}\t{flags}")
            index += 1
    return lines


def scoring_lines() -> list[str]:
    return [
        "id\tcomment_text",
        "x1\tThanks for the careful copyedit",
        "x2\tYou are a stupid idiot",
        "x3\tI will kill you",
        "x4\tThe lead section needs a citation",
        "x5\tGo to hell you filthy moron",
    ]


def write_lines(path: Path, lines: list[str]) -> Path:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def train_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "train.tsv", training_lines())


@pytest.fixture
def test_file(tmp_path: Path) -> Path:
    return write_lines(tmp_path / "test.tsv", scoring_lines())


@pytest.fixture
def train_frame(train_file: Path) -> pd.DataFrame:
    from toxicflags.training.dataset import read_training_file

    return read_training_file(train_file)


@pytest.fixture
def plain_console() -> MLConsole:
    return MLConsole(enabled=False)
