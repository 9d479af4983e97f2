"""Command line entry point: run benchmark groups without the web service."""

import argparse
import sys
from pathlib import Path

from webhook_bench.benchmark import BenchmarkRunner
from webhook_bench.shared.config import Config
from webhook_bench.shared.logging import LoggingManager


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark webhook endpoints")
    parser.add_argument("groups", nargs="*", help="Benchmark group names (default: all groups)")
    parser.add_argument("--output", type=Path, default=None, help="Directory to write CSV results to")
    parser.add_argument("--list", action="store_true", help="List benchmark groups and exit")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = Config()
    LoggingManager.setup_logging(config.log_level, config)

    runner = BenchmarkRunner(config, group_names=args.groups, output_dir=args.output)
    if args.list:
        for name in runner.list_groups():
            print(name)
        return 0

    unknown = [name for name in runner.group_names if name not in runner.benchmark.definitions]
    if unknown:
        print(f"Unknown benchmark group(s): {', '.join(unknown)}", file=sys.stderr)
        return 2

    results = runner.run()
    return 0 if len(results) == len(runner.group_names) else 1


if __name__ == "__main__":
    sys.exit(main())
