# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import itertools

import pandas as pd

from toxicflags.labels import CATEGORIES, CATEGORY_BITS, pack_frame, pack_labels, unpack_label, unpack_series
from toxicflags.schemas import LabeledComment


def test_every_flag_combination_survives_packing():
    for values in itertools.product([False, True], repeat=len(CATEGORIES)):
        flags = dict(zip(CATEGORIES, values))
        assert unpack_label(pack_labels(flags)) == flags


def test_toxic_only_sets_bit_six():
    packed = pack_labels({"toxic": True})
    assert packed == 64
    decoded = unpack_label(packed)
    assert decoded["toxic"] is True
    assert not any(decoded[name] for name in CATEGORIES if name != "toxic")


def test_bit_zero_is_never_used():
    everything = pack_labels({name: True for name in CATEGORIES})
    assert everything == 0b1111110
    assert everything & 1 == 0
    assert sorted(CATEGORY_BITS.values()) == [1, 2, 3, 4, 5, 6]


def test_unpack_ignores_bits_outside_the_categories():
    assert not any(unpack_label(1 | 128).values())


def test_pack_labels_reads_record_attributes():
    record = LabeledComment(id="1", comment_text="x", obscene=True, identity_hate=True)
    assert pack_labels(record) == 16 + 2


def test_frame_helpers_match_scalar_helpers():
    rows = [
        {"toxic": True, "severe_toxic": False, "obscene": True, "threat": False, "insult": True, "identity_hate": False},
        {name: False for name in CATEGORIES},
        {name: True for name in CATEGORIES},
    ]
    frame = pd.DataFrame(rows)
    packed = pack_frame(frame)
    assert packed.tolist() == [pack_labels(row) for row in rows]
    decoded = unpack_series(packed)
    assert decoded.to_dict(orient="records") == rows
