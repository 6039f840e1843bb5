from __future__ import annotations

import argparse
import sys
from typing import Sequence

from helpers.resource_monitor import StageProfiler
from log_helpers import log, log_verbose, reset_timestamp
from nl_foundations.collocations import format_bigram, significant_bigrams
from nl_foundations.settings import NLFSettings, load_settings
from nl_foundations.textfile import TextFileError, read_text


def build_parser(settings: NLFSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank the adjacent word pairs of each file by their t-test significance."
    )
    parser.add_argument("files", nargs="+", help="Text files to analyse.")
    parser.add_argument(
        "-c",
        "--case",
        action="store_true",
        default=settings.case_sensitive,
        help="Use case-sensitive comparisons (default: %(default)s).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only print the N most significant bigrams per file (default: all).",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Log timing and process resource usage for each file.",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    reset_timestamp()
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    log_verbose(3, f"[bigrams:v3] Parsed CLI arguments: {vars(args)}")
    if args.limit is not None and args.limit < 0:
        parser.error(f"--limit must be >= 0 (got {args.limit})")

    profiler = StageProfiler(args.profile)
    for path in args.files:
        try:
            text = read_text(path)
        except TextFileError as exc:
            log(f"[bigrams] {exc}")
            return 1
        scores = profiler.measure(
            f"bigrams {path}",
            lambda: significant_bigrams(text, case_sensitive=args.case),
        )
        log_verbose(1, f"[bigrams] {path}: {len(scores)} distinct bigram(s).")
        if args.limit is not None:
            scores = scores[: args.limit]
        for score in scores:
            sys.stdout.write(format_bigram(score) + "\n")
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
