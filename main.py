#!/usr/bin/env python3
"""
FibBench - Fibonacci Algorithm Comparison
Main entry point for computing the nth Fibonacci number.

Usage:
    python main.py 4 1000
    python main.py -2 50 --output result.txt
    python main.py 4 5000 --compare --json reports/bench.json
    python main.py --help
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent))

from core.algorithm_config import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_REPEATS,
    DEFAULT_SWEEP_POINTS,
    DEFAULT_DIVERGENCE_LIMIT,
    get_algorithm_info,
    is_practical,
    valid_versions,
)
from core.benchmark import compare_algorithms, find_closed_form_divergence, sweep, sweep_points
from core.calculator import FibonacciCalculator
from core.errors import FibonacciError, InvalidArgumentFormat, NegativeIndex
from utils.file_handler import ResultFileHandler
from utils.reporter import ReportGenerator

logger = logging.getLogger("fibbench")


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    try:
        version = parse_version(args.version)
        n = parse_index(args.n)

        calculator = FibonacciCalculator()
        file_handler = ResultFileHandler()
        reporter = ReportGenerator()

        result = calculator.compute(n, version)
        if logger.isEnabledFor(logging.INFO):
            logger.info(f"Calculated {reporter.summarize(result)}")

        write_timing = file_handler.write_result(result.value, args.output)

        if not args.quiet:
            reporter.print_calculation_report(result, write_timing)

        if args.compare or args.json or args.csv:
            report = compare_algorithms(n, repeats=args.repeat, progress=args.verbose)
            if not args.quiet:
                reporter.print_benchmark_report(report)
            if args.json:
                path = reporter.generate_json_report(report, args.json)
                print(f"JSON report saved: {path}")
            if args.csv:
                path = reporter.generate_csv_report(report, args.csv)
                print(f"CSV report saved: {path}")

        if args.plot:
            points = sweep_points(n, args.sweep_points)
            series = {}
            for v in valid_versions():
                if is_practical(v, n):
                    series[get_algorithm_info(v)['name']] = sweep(v, points, progress=args.verbose)
            path = reporter.generate_timing_plot(series, args.plot)
            print(f"Timing plot saved: {path}")

        if args.divergence is not None:
            first = find_closed_form_divergence(limit=args.divergence)
            if first is None:
                print(f"Closed form matches the exact value for every n <= {args.divergence}")
            else:
                print(f"Closed form first diverges at n = {first}")

        return 0

    except FibonacciError as e:
        print(e.message)
        return 1

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def parse_version(text: str) -> int:
    """Algorithm number; dashes are ignored so '-4' selects version 4"""
    try:
        return int(text.replace("-", ""))
    except ValueError:
        raise InvalidArgumentFormat("version", text) from None


def parse_index(text: str) -> int:
    try:
        n = int(text)
    except ValueError:
        raise InvalidArgumentFormat("n", text) from None
    if n < 0:
        raise NegativeIndex(n)
    return n


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        description="FibBench - compute the nth Fibonacci number with one of four algorithms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Algorithms:
  1  recursive      naive recursion (64-bit, small n only)
  2  iterative      big integer sliding window
  3  closed-form    Binet's formula in double precision (approximate)
  4  fast-doubling  O(log n) multiplications

Examples:
  python main.py 4 100000
  python main.py -1 30 --output fib30.txt
  python main.py 2 2000 --compare --csv reports/bench.csv
  python main.py 4 1000 --plot reports/timings.png
  python main.py 4 10 --divergence
        """
    )

    parser.add_argument(
        'version',
        help='Algorithm number [1-4], dashes are ignored, so -N also works'
    )
    parser.add_argument(
        'n',
        help='Non-negative index of the Fibonacci number'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        default=DEFAULT_OUTPUT_FILE,
        help=f'File the result is written to (default: {DEFAULT_OUTPUT_FILE})'
    )
    parser.add_argument(
        '--json',
        type=str,
        help='Write a JSON benchmark report to this path (implies --compare)'
    )
    parser.add_argument(
        '--csv',
        type=str,
        help='Write a CSV benchmark report to this path (implies --compare)'
    )

    # Benchmark options
    parser.add_argument(
        '--compare',
        action='store_true',
        help='Also run every algorithm on n and compare timings'
    )
    parser.add_argument(
        '--repeat',
        type=int,
        default=DEFAULT_REPEATS,
        help=f'Runs per algorithm when comparing (default: {DEFAULT_REPEATS})'
    )
    parser.add_argument(
        '--plot',
        type=str,
        help='Save a plot of calculation time against n to this path'
    )
    parser.add_argument(
        '--sweep-points',
        type=int,
        default=DEFAULT_SWEEP_POINTS,
        help=f'Number of n values sampled for --plot (default: {DEFAULT_SWEEP_POINTS})'
    )
    parser.add_argument(
        '--divergence',
        type=int,
        nargs='?',
        const=DEFAULT_DIVERGENCE_LIMIT,
        metavar='LIMIT',
        help=f'Find the first n where the closed form is wrong (default limit: {DEFAULT_DIVERGENCE_LIMIT})'
    )

    # Display options
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress timing output'
    )

    return parser


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
