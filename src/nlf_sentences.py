from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from helpers.resource_monitor import StageProfiler
from log_helpers import log, log_verbose, reset_timestamp
from nl_foundations.segmenter import render, segment, train_sentence_model
from nl_foundations.settings import NLFSettings, load_settings
from nl_foundations.textfile import TextFileError, read_text


def build_parser(settings: NLFSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Train a sentence-boundary model from a tagged file, then segment the "
            "remaining files with it."
        )
    )
    parser.add_argument(
        "training_file",
        help="Training text whose sentence-final punctuation carries the marker suffix (e.g. 'end.+').",
    )
    parser.add_argument("files", nargs="*", help="Untagged text files to segment.")
    parser.add_argument(
        "--context-size",
        type=int,
        default=settings.context_size,
        help="Number of preceding tokens used as evidence (default: %(default)s).",
    )
    parser.add_argument(
        "--marker",
        default=settings.training_marker,
        help="Suffix marking sentence-final punctuation in the training file (default: %(default)s).",
    )
    parser.add_argument(
        "--line-width",
        type=int,
        default=settings.line_width,
        help="Wrap output lines after this many characters (default: %(default)s).",
    )
    parser.add_argument(
        "--no-scores",
        action="store_true",
        help="Omit the (positive,negative) log-likelihood pairs after punctuation.",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Log timing and process resource usage for each stage.",
    )
    return parser


class TrainingProgressPrinter:
    """Provides throttle-controlled training progress logs."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._last_emit = 0.0

    def __call__(self, stage: str, completed: int, total: int) -> None:
        if total <= 0:
            return
        now = time.perf_counter()
        if completed != total and (now - self._last_emit) < 0.75:
            return
        self._last_emit = now
        pct = (completed / total) * 100.0
        log_verbose(2, f"[sentences] {self.label}: {stage} {pct:5.1f}% ({completed}/{total})")


def run(argv: Sequence[str] | None = None) -> int:
    reset_timestamp()
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    log_verbose(3, f"[sentences:v3] Parsed CLI arguments: {vars(args)}")

    if args.context_size < 0:
        parser.error(f"--context-size must be >= 0 (got {args.context_size})")
    if args.line_width < 1:
        parser.error(f"--line-width must be >= 1 (got {args.line_width})")
    if not args.marker:
        parser.error("--marker cannot be empty")

    profiler = StageProfiler(args.profile)
    try:
        training_text = read_text(args.training_file)
    except TextFileError as exc:
        log(f"[sentences] {exc}")
        return 1
    model = profiler.measure(
        f"train {args.training_file}",
        lambda: train_sentence_model(
            training_text,
            args.context_size,
            args.marker,
            progress_callback=TrainingProgressPrinter(args.training_file),
        ),
    )
    log_verbose(
        1,
        f"[sentences] Trained on {args.training_file}: {len(model)} punctuation type(s), "
        f"context size {model.size}.",
    )

    for path in args.files:
        try:
            text = read_text(path)
        except TextFileError as exc:
            log(f"[sentences] {exc}")
            return 1
        decisions = profiler.measure(f"segment {path}", lambda: segment(model, text), tokens=len)
        sys.stdout.write(render(decisions, args.line_width, show_scores=not args.no_scores))
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
