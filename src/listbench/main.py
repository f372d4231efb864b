#!/usr/bin/env python3
"""
===============================================================================
LISTBENCH - MAIN ENTRY POINT
===============================================================================
ArrayList (list) vs LinkedList (collections.deque) performance comparison.

Runs the benchmark driver once, then prints the comparison table, the
winner per operation, the final score, and practical recommendations.

USAGE:
    listbench                               # Defaults: warmup 1000, test 10000
    listbench --config config/benchmark_config.yaml
    listbench --log-level WARNING           # Hide progress lines

DEPENDENCIES:
    numpy, pandas, matplotlib, pyyaml
===============================================================================
"""

import sys
import argparse
import logging

import yaml

from .benchmarks import ListBenchmark
from .constants import DEFAULT_TEST_ITERATIONS, DEFAULT_WARMUP_ITERATIONS
from .report import print_results, print_summary

logger = logging.getLogger(__name__)

BANNER_WIDTH = 64
CONFIG_KEYS = ('warmup_iterations', 'test_iterations')


def default_config() -> dict:
    """Compiled-in benchmark configuration."""
    return {
        'benchmark': {
            'warmup_iterations': DEFAULT_WARMUP_ITERATIONS,
            'test_iterations': DEFAULT_TEST_ITERATIONS,
        }
    }


def load_config(config_path: str = None) -> dict:
    """
    Load benchmark configuration from a YAML file.

    Args:
        config_path: Path to YAML config. When None, the compiled-in
            defaults are returned without touching the filesystem.

    Returns:
        Dictionary with a 'benchmark' section holding integer
        'warmup_iterations' and 'test_iterations'.

    Raises:
        ValueError: if the file is not a mapping or a value is not an integer.
    """
    config = default_config()
    if config_path is None:
        return config

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"{config_path}: top level must be a mapping.")
    section = loaded.get('benchmark') or {}
    if not isinstance(section, dict):
        raise ValueError(f"{config_path}: 'benchmark' must be a mapping.")

    for key in CONFIG_KEYS:
        if key not in section:
            continue
        value = section[key]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"{config_path}: benchmark.{key} must be an integer, got {value!r}."
            )
        config['benchmark'][key] = value
    return config


def setup_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _banner(title: str) -> None:
    print("=" * BANNER_WIDTH)
    print(title.center(BANNER_WIDTH))
    print("=" * BANNER_WIDTH)


def run(config: dict, out=None) -> ListBenchmark:
    """Run every scenario from *config* and print both reports to *out*."""
    settings = config['benchmark']
    perf_test = ListBenchmark(
        warmup_iterations=settings['warmup_iterations'],
        test_iterations=settings['test_iterations'],
    )
    perf_test.run_all_tests()

    results = perf_test.get_results()
    print_results(results, out=out)
    print_summary(results, out=out)
    return perf_test


def main(argv=None):
    """
    Main entry point. Parses command line arguments, runs the benchmark
    and prints the reports.
    """
    parser = argparse.ArgumentParser(
        description='ArrayList vs LinkedList performance test',
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to benchmark config YAML')
    parser.add_argument('--log-level', type=str, default='INFO',
                        help='Logging level (default: INFO)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    _banner("ArrayList vs LinkedList Performance Test")
    print()

    config = load_config(args.config)
    run(config)

    _banner("TEST COMPLETED")


if __name__ == '__main__':
    main()
