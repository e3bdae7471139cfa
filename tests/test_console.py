# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from toxicflags.console import MLConsole, format_counts, format_flags
from toxicflags.schemas import CategoryCounts, CommentFlags, TestComment


def test_format_counts_matches_report_line():
    counts = CategoryCounts(rows=9, toxic=4, severe_toxic=1, obscene=2, threat=0, insult=3, identity_hate=1)
    assert format_counts(counts) == "Toxic: 4, Severe Toxic: 1, Obscene: 2, Threat: 0, Insult: 3, Identity Hate: 1"


def test_plain_console_output(capsys):
    console = MLConsole(enabled=False)
    console.progress("Loading data...")
    console.done()
    console.warn("careful")
    console.metrics_table({"Accuracy": "90.00%", "LogLoss": "0.31"}, title="Toxic")
    console.flagged(TestComment(id="1", comment_text="you [idiot]"), CommentFlags(toxic=True), explanations=["idiot"])

    out = capsys.readouterr().out
    assert out.startswith("Loading data...Done\n[WARN] careful\nToxic\n")
    assert "  Accuracy:  90.00%" in out
    assert "you [idiot] - " in out
    assert format_flags(CommentFlags(toxic=True)) in out
    assert "Top tokens: idiot" in out


def test_rich_console_keeps_brackets_literal(capsys):
    console = MLConsole(enabled=True)
    console.line("[bold]not markup[/bold]")
    console.metrics_table({"MicroAccuracy": "0.912"}, title="Evaluation metrics")
    out = capsys.readouterr().out
    assert "[bold]not markup[/bold]" in out
    assert "MicroAccuracy" in out and "0.912" in out
