# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .labels import CATEGORIES, DISPLAY_NAMES
from .schemas import CategoryCounts, CommentFlags, TestComment


def format_counts(counts: CategoryCounts) -> str:
    return ", ".join(f"{DISPLAY_NAMES[name]}: {getattr(counts, name)}" for name in CATEGORIES)


def format_flags(flags: CommentFlags) -> str:
    return ", ".join(f"{DISPLAY_NAMES[name]}: {getattr(flags, name)}" for name in CATEGORIES)


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def progress(self, text: str) -> None:
        """Start a status line that a later ``done()`` completes."""
        if self._console:
            self._console.print(escape(text), end="")
        else:
            print(text, end="", flush=True)

    def done(self) -> None:
        if self._console:
            self._console.print("[bold green]Done[/bold green]")
        else:
            print("Done")

    def line(self, text: str = "") -> None:
        if self._console:
            self._console.print(escape(text))
        else:
            print(text)

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {escape(text)}")
        else:
            print(f"[INFO] {text}")

    def warn(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")
        else:
            print(f"[WARN] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {escape(text)}")
        else:
            print(f"[OK] {text}")

    def metrics_table(self, metrics: dict[str, str], *, title: str) -> None:
        if self._console:
            table = Table(title=escape(title), show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for key, value in metrics.items():
                table.add_row(key, value)
            self._console.print(table)
            return

        print(title)
        width = max((len(key) for key in metrics), default=0) + 1
        for key, value in metrics.items():
            print(f"  {key + ':':<{width}}  {value}")
        print()

    def counts(self, counts: CategoryCounts) -> None:
        self.line(format_counts(counts))

    def flagged(self, comment: TestComment, flags: CommentFlags, *, explanations: list[str] | None = None) -> None:
        self.line(f"{comment.comment_text} - ")
        self.line()
        self.line(format_flags(flags))
        if explanations:
            self.line(f"Top tokens: {', '.join(explanations)}")
        self.line()
