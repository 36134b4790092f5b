#!/usr/bin/env python3
"""Quick perf benchmark for JSON tokenizing + CST parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
import logging
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from jsoncst import ParserOptions, iter_nodes
from jsoncst.pipeline import run_parse

logger = logging.getLogger("time_parse")


def _collect_json_files(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.json")) if path.is_file()]


def _run_once(
    texts: list[str],
    *,
    options: ParserOptions,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_tokens = 0
    total_nodes = 0
    total_failures = 0
    iterator = tqdm(texts, desc=label, unit="file") if show_progress else texts
    for text in iterator:
        result = run_parse(text, options=options)
        if result.tokens is not None:
            total_tokens += len(result.tokens)
        if result.root is None:
            total_failures += 1
            continue
        total_nodes += sum(1 for _ in iter_nodes(result.root))
    duration = time.perf_counter() - start
    return duration, total_tokens, total_nodes, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark JSON CST parsing throughput")
    parser.add_argument("--root", type=Path, required=True, help="Directory searched for *.json files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=0,
        help="Nesting limit passed to the parser (0 = no limit)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log per-file parse failures")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid --root: {root}")

    files = _collect_json_files(root)
    if not files:
        raise SystemExit(f"No .json files found under {root}")
    texts = [path.read_text(encoding="utf-8") for path in files]
    logger.info("loaded %d files from %s", len(files), root)

    options = ParserOptions(max_depth=args.max_depth) if args.max_depth > 0 else ParserOptions.unlimited()
    show_progress = not args.no_progress
    warmups = max(args.warmups, 0)
    runs = max(args.runs, 1)

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(warmups):
            _run_once(texts, options=options, label=f"warmup {warmup_idx + 1}/{warmups}", show_progress=show_progress)

        timings: list[float] = []
        tokens_count = 0
        nodes_count = 0
        failures_count = 0
        for run_idx in range(runs):
            duration, tokens_count, nodes_count, failures_count = _run_once(
                texts,
                options=options,
                label=f"run {run_idx + 1}/{runs}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, tokens_count, nodes_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, tokens_count, nodes_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, tokens_count, nodes_count, failures_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {len(files)} ({failures_count} failed)")
    print(f"Tokens: {tokens_count}")
    print(f"Nodes: {nodes_count}")
    print(f"Runs: {len(timings)} (warmups={warmups})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):  {len(files) / mean:.1f}")
    print(f"Tokens/s (mean): {tokens_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
