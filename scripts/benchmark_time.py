#!/usr/bin/env python
"""Benchmark omnisniff classification: timing and accuracy.

Sample files are read from a directory laid out as ``<extension>/<file>``
(see ``utils.collect_sample_files``).  Can be run standalone for
human-readable output, or with ``--json-only`` for machine-readable JSON.
"""

from __future__ import annotations

import argparse
import json
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark omnisniff classification (timing and accuracy).",
    )
    parser.add_argument(
        "--family",
        choices=["document", "image", "audio_video"],
        default="document",
        help="Detector family to benchmark (default: document)",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        required=True,
        help="Path to sample data directory laid out as <extension>/<file>",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=100,
        help="Classification passes per file (default: 100)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()
    if args.iterations < 1:
        parser.error("--iterations must be a positive integer")

    data_dir: Path = args.data_dir.resolve()
    if not data_dir.is_dir():
        print(f"ERROR: data directory not found: {data_dir}", file=sys.stderr)
        sys.exit(1)

    from utils import collect_sample_files, format_bytes

    sample_files = collect_sample_files(data_dir)
    if not sample_files:
        print("ERROR: no sample files found!", file=sys.stderr)
        sys.exit(1)

    # Pre-read all file data so I/O doesn't affect timing
    all_data = [(ext, fp, fp.read_bytes()) for ext, fp in sample_files]

    t0 = time.perf_counter()
    import omnisniff
    from omnisniff.enums import MediaFamily

    import_time = time.perf_counter() - t0
    family = MediaFamily(args.family)

    file_times: list[float] = []
    correct = 0
    total_bytes = 0
    for expected, fp, data in all_data:
        ft0 = time.perf_counter()
        for _ in range(args.iterations):
            result = omnisniff.classify(data, family)
        file_elapsed = (time.perf_counter() - ft0) / args.iterations
        file_times.append(file_elapsed)
        total_bytes += len(data)

        detected = result.extension if result is not None else None
        if detected == expected:
            correct += 1

        if args.json_only:
            print(
                json.dumps(
                    {
                        "expected": expected,
                        "path": str(fp),
                        "detected": detected,
                        "elapsed": file_elapsed,
                    }
                )
            )

    if args.json_only:
        print(json.dumps({"__timing__": sum(file_times), "import_time": import_time}))
        return

    mean_us = statistics.mean(file_times) * 1_000_000
    median_us = statistics.median(file_times) * 1_000_000
    accuracy = correct / len(all_data) * 100

    print(f"Family:       {args.family}")
    print(f"  Files:      {len(all_data)} ({format_bytes(total_bytes)})")
    print(f"  Accuracy:   {correct}/{len(all_data)} ({accuracy:.1f}%)")
    print()
    print("Timing:")
    print(f"  Import:     {import_time:.3f}s")
    print(f"  Per-file:   mean={mean_us:.1f}us  median={median_us:.1f}us")


if __name__ == "__main__":
    main()
