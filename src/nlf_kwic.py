from __future__ import annotations

import argparse
import sys
from typing import Sequence

from helpers.resource_monitor import StageProfiler
from log_helpers import log, log_verbose, reset_timestamp
from nl_foundations.kwic import format_segments, kwic_segments
from nl_foundations.settings import NLFSettings, load_settings
from nl_foundations.textfile import TextFileError, read_text


def build_parser(settings: NLFSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show every occurrence of a word together with its surrounding tokens."
    )
    parser.add_argument("word", help="Exact token to look up.")
    parser.add_argument("files", nargs="+", help="Text files to search.")
    parser.add_argument(
        "-w",
        "--window",
        type=int,
        default=settings.kwic_window,
        metavar="WIDTH",
        help="Context window width in tokens (default: %(default)s).",
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
    log_verbose(3, f"[kwic:v3] Parsed CLI arguments: {vars(args)}")
    if args.window < 0:
        parser.error(f"--window must be >= 0 (got {args.window})")

    profiler = StageProfiler(args.profile)
    for path in args.files:
        try:
            text = read_text(path)
        except TextFileError as exc:
            log(f"[kwic] {exc}")
            return 1
        segments = profiler.measure(f"kwic {path}", lambda: kwic_segments(text, args.word, args.window))
        if not segments:
            log_verbose(1, f"[kwic] {path}: '{args.word}' not found.")
            continue
        for line in format_segments(segments):
            sys.stdout.write(line + "\n")
    return 0


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
