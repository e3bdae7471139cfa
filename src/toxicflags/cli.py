# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from .console import MLConsole
from .env import get_bool_env, get_env, get_float_env, get_int_env
from .features import top_tokens
from .inference.predictor import BINARY, MULTICLASS, ToxicityPredictor
from .schemas import ToxicFlagsError
from .training.dataset import read_test_file, read_training_file
from .training.trainer import (
    DEFAULT_MAX_ITER,
    DEFAULT_SEED,
    DEFAULT_TEST_FRACTION,
    split_dataset,
    train_binary_models,
    train_multiclass_model,
)


def _fraction(value: str) -> float:
    parsed = float(value)
    if not 0.0 < parsed < 1.0:
        raise argparse.ArgumentTypeError(f"must be between 0 and 1, got {value}")
    return parsed


def _non_negative(value: str) -> int:
    parsed = int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return parsed


def _positive(value: str) -> int:
    parsed = int(value)
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return parsed


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="toxicflags",
        description="Train toxicity classifiers on train.tsv, report holdout metrics and count flagged comments in test.tsv.",
    )
    parser.add_argument("--train", default=get_env("TOXICFLAGS_TRAIN_FILE", "train.tsv"), help="Labeled tab-separated training file")
    parser.add_argument("--test", default=get_env("TOXICFLAGS_TEST_FILE", "test.tsv"), help="Tab-separated file of comments to score")
    parser.add_argument(
        "--strategy",
        choices=(BINARY, MULTICLASS, "both"),
        default="both",
        help="Six binary classifiers, one classifier over the packed label, or both",
    )
    parser.add_argument(
        "--test-fraction",
        type=_fraction,
        default=get_float_env("TOXICFLAGS_TEST_FRACTION", DEFAULT_TEST_FRACTION),
        help="Share of the training file held out for evaluation",
    )
    parser.add_argument("--seed", type=int, default=get_int_env("TOXICFLAGS_SEED", DEFAULT_SEED), help="Random seed of the train/holdout split")
    parser.add_argument(
        "--max-iter",
        type=_positive,
        default=get_int_env("TOXICFLAGS_MAX_ITER", DEFAULT_MAX_ITER),
        help="Iteration cap of the logistic regression solver",
    )
    parser.add_argument("--model-dir", default=get_env("TOXICFLAGS_MODEL_DIR"), help="Export trained predictors under this directory")
    parser.add_argument("--show-flagged", type=_non_negative, default=0, help="Print up to N flagged test comments per strategy")
    parser.add_argument("--plain", action="store_true", default=get_bool_env("TOXICFLAGS_PLAIN", False), help="Plain text output")
    args = parser.parse_args(argv)
    # argparse skips type= for non-string defaults taken from the environment
    for flag, dest, check in (("--test-fraction", "test_fraction", _fraction), ("--max-iter", "max_iter", _positive)):
        try:
            setattr(args, dest, check(getattr(args, dest)))
        except argparse.ArgumentTypeError as exc:
            parser.error(f"argument {flag}: {exc}")
    return args


def _score(predictor: ToxicityPredictor, test_df: pd.DataFrame, *, console: MLConsole, show_flagged: int) -> None:
    if show_flagged:
        for shown, (comment, flags) in enumerate(predictor.flagged(test_df), 1):
            console.flagged(comment, flags, explanations=top_tokens(comment.comment_text, max_items=4))
            if shown >= show_flagged:
                break
    counts = predictor.score_frame(test_df)
    console.counts(counts)


def run(args: argparse.Namespace, console: MLConsole) -> int:
    console.progress("Loading data...")
    data = read_training_file(Path(args.train))
    test_df = read_test_file(Path(args.test))
    console.done()

    train_df, holdout_df = split_dataset(data, test_fraction=args.test_fraction, seed=args.seed)
    console.info(f"train_rows={len(train_df)} holdout_rows={len(holdout_df)} test_rows={len(test_df)}")

    strategies = (BINARY, MULTICLASS) if args.strategy == "both" else (args.strategy,)
    for strategy in strategies:
        trainer = train_binary_models if strategy == BINARY else train_multiclass_model
        result = trainer(train_df, holdout_df, console=console, max_iter=args.max_iter)
        predictor: ToxicityPredictor = result["predictor"]
        _score(predictor, test_df, console=console, show_flagged=args.show_flagged)
        if args.model_dir:
            paths = predictor.save(Path(args.model_dir) / strategy)
            console.success(f"{strategy} model: {paths['model']}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    console = MLConsole(enabled=not args.plain)
    try:
        return run(args, console)
    except (FileNotFoundError, ToxicFlagsError) as exc:
        console.warn(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
