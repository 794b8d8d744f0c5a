#!/usr/bin/env python3
"""Algorithm visualizer CLI.

Generates the step trace of a Java-like snippet (a file or a built-in
sample) and prints it as text or JSON, or plays it back in the terminal.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from algoviz import constants
from algoviz.api import dump_trace, list_samples, trace_to_json
from algoviz.generator import generate
from algoviz.playback_types import PlaybackConfig
from algoviz.samples import DEFAULT_SAMPLE, get_sample
from algoviz.terminal import play_in_terminal


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Step-by-step algorithm visualizer")
    parser.add_argument("file", nargs="?",
                        help="Snippet file to visualize")
    parser.add_argument("--sample", "-s", default=None,
                        help=f"Built-in sample name (default: {DEFAULT_SAMPLE})")
    parser.add_argument("--list-samples", action="store_true",
                        help="List the built-in samples and exit")
    parser.add_argument("--json", action="store_true",
                        help="Print the trace as JSON")
    parser.add_argument("--play", action="store_true",
                        help="Play the trace back in the terminal")
    parser.add_argument("--speed", default="1x",
                        choices=list(constants.SPEED_PRESETS),
                        help="Playback speed preset (default: 1x)")
    parser.add_argument("--loop", action="store_true",
                        help="Restart playback after completion")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log pipeline progress and print statistics")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.list_samples:
        for name, category, title in list_samples():
            print(f"  {name:<24} {category:<6} {title}")
        return 0

    if args.file:
        with open(args.file) as f:
            source = f.read()
    else:
        try:
            source = get_sample(args.sample or DEFAULT_SAMPLE).source
        except ValueError as e:
            print(e, file=sys.stderr)
            return 2

    trace = generate(source)

    if args.play:
        config = PlaybackConfig(
            speed_ms=constants.SPEED_PRESETS[args.speed], auto_play=args.loop
        )
        try:
            asyncio.run(play_in_terminal(trace, sys.stdout, config))
        except KeyboardInterrupt:
            pass
    elif args.json:
        print(trace_to_json(trace))
    else:
        print(dump_trace(trace))

    if args.verbose:
        print()
        print(trace.stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
