# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from toxicflags.env import get_bool_env, get_env, get_float_env, get_int_env


def test_missing_and_blank_values_use_default(monkeypatch):
    monkeypatch.delenv("TOXICFLAGS_X", raising=False)
    assert get_env("TOXICFLAGS_X", "d") == "d"
    monkeypatch.setenv("TOXICFLAGS_X", "   ")
    assert get_env("TOXICFLAGS_X", "d") == "d"
    assert get_int_env("TOXICFLAGS_X", 5) == 5


def test_malformed_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("TOXICFLAGS_X", "abc")
    assert get_int_env("TOXICFLAGS_X", 3) == 3
    assert get_float_env("TOXICFLAGS_X", 0.2) == 0.2
    monkeypatch.setenv("TOXICFLAGS_X", " 0.35 ")
    assert get_float_env("TOXICFLAGS_X", 0.2) == 0.35


def test_bool_values(monkeypatch):
    monkeypatch.setenv("TOXICFLAGS_X", "On")
    assert get_bool_env("TOXICFLAGS_X") is True
    monkeypatch.setenv("TOXICFLAGS_X", "0")
    assert get_bool_env("TOXICFLAGS_X", True) is False
    monkeypatch.setenv("TOXICFLAGS_X", "perhaps")
    assert get_bool_env("TOXICFLAGS_X", True) is True
