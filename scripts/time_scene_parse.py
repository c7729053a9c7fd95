#!/usr/bin/env python3
"""Quick perf benchmark for scene parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from pbrtpy.parser import ParseMode, parse_result


def _collect_scene_files(root: Path) -> list[Path]:
    files = sorted(root.rglob("*.pbrt"))
    return [path for path in files if path.is_file()]


def _run_once(
    files: list[Path],
    *,
    label: str,
    mode: ParseMode,
    show_progress: bool,
) -> tuple[float, int, int, int]:
    start = time.perf_counter()
    total_directives = 0
    total_failures = 0
    iterator = (
        tqdm(files, desc=label, unit="file")
        if show_progress
        else files
    )
    for path in iterator:
        parsed = parse_result(path.read_text(encoding="utf-8"), mode=mode, path=str(path))
        if parsed.document is None:
            total_failures += 1
            continue
        total_directives += len(parsed.document)
    duration = time.perf_counter() - start
    return duration, len(files), total_directives, total_failures


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark PBRT scene parsing throughput")
    parser.add_argument("scene_root", type=Path, help="Directory searched recursively for *.pbrt files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.PERMISSIVE,
        help="Parser mode (default: permissive, since included fragments are rarely balanced)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    scene_root: Path = args.scene_root
    if not scene_root.exists() or not scene_root.is_dir():
        raise SystemExit(f"Invalid scene root: {scene_root}")

    files = _collect_scene_files(scene_root)
    if not files:
        raise SystemExit(f"No .pbrt files found under {scene_root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                files,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                mode=args.mode,
                show_progress=show_progress,
            )

        timings: list[float] = []
        files_count = 0
        directives_count = 0
        failures_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, files_count, directives_count, failures_count = _run_once(
                files,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                mode=args.mode,
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, files_count, directives_count, failures_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, files_count, directives_count, failures_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, files_count, directives_count, failures_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {scene_root}")
    print(f"Files: {files_count}")
    print(f"Directives: {directives_count}")
    print(f"Failed files: {failures_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Files/s (mean):      {files_count / mean:.1f}")
    print(f"Directives/s (mean): {directives_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
