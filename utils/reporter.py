"""
Report generation utilities for Fibonacci calculations and benchmarks.
Handles console, JSON, CSV and timing plot output.
"""

import json
import csv
from pathlib import Path
from typing import List, Dict, Tuple, Any, Optional
from datetime import datetime
import matplotlib.pyplot as plt
import seaborn as sns

from core.algorithm_config import TIME_DECIMALS, get_algorithm_info
from core.bigint import to_decimal
from core.benchmark import BenchmarkReport
from core.calculator import CalculationResult
from core.timing import TimingRecord

CSV_FIELDS = ['version', 'algorithm', 'exact', 'matches_reference', 'status',
              'mean', 'median', 'std', 'min', 'max']


class ReportGenerator:
    def __init__(self, decimals: int = TIME_DECIMALS):
        """
        Initialize report generator.

        Args:
            decimals: Decimal places used when printing seconds
        """
        self.decimals = decimals

    def print_calculation_report(self, result: CalculationResult,
                                 write_timing: Optional[TimingRecord] = None) -> None:
        """
        Print calculation and write times in seconds.

        Args:
            result: Calculation result
            write_timing: Timing of the output file write, if one happened
        """
        print(f"Calculation time: {result.timing.format_seconds(self.decimals)} seconds")
        if write_timing is not None:
            print(f"Write time: {write_timing.format_seconds(self.decimals)} seconds")

    def print_benchmark_report(self, report: BenchmarkReport) -> None:
        """Print a comparison table for a benchmark run"""
        print("=" * 60)
        print("FIBONACCI ALGORITHM COMPARISON")
        print("=" * 60)
        print(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print(f"n: {report.n}")
        print(f"Repeats per algorithm: {report.repeats}")
        print(f"Result digits: {len(to_decimal(report.reference_value))}")
        print(f"Processing time: {report.processing_time:.2f} seconds")
        print()

        print(f"{'#':<3}{'Algorithm':<16}{'Median (s)':>14}{'Min (s)':>14}  Result")
        print("-" * 60)
        for timing in report.timings:
            stats = timing.statistics
            status = "ok" if timing.matches_reference else "MISMATCH"
            print(f"{timing.version:<3}{timing.name:<16}"
                  f"{stats.get('median', 0):>14.{self.decimals}f}"
                  f"{stats.get('min', 0):>14.{self.decimals}f}  {status}")

        if report.skipped:
            print()
            print("SKIPPED:")
            for version, reason in sorted(report.skipped.items()):
                print(f"{version}. {get_algorithm_info(version)['name']}: {reason}")

        fastest = report.fastest()
        if fastest is not None:
            print()
            print(f"Fastest: {fastest.name}")
        if not report.exact_results_agree:
            print("Warning: exact algorithms disagree on the result")

        print("=" * 60)

    def generate_json_report(self, report: BenchmarkReport, output_path: str) -> str:
        """
        Generate JSON report of a benchmark run.

        Args:
            report: Benchmark report
            output_path: Output file path

        Returns:
            Path to generated JSON file
        """
        data = {
            'generated': datetime.now().isoformat(),
            'n': report.n,
            'repeats': report.repeats,
            'processing_time': report.processing_time,
            'reference_value': to_decimal(report.reference_value),
            'exact_results_agree': report.exact_results_agree,
            'algorithms': [
                {
                    'version': t.version,
                    'name': t.name,
                    'matches_reference': t.matches_reference,
                    'samples': t.samples,
                    'statistics': t.statistics
                }
                for t in report.timings
            ],
            'skipped': {str(v): reason for v, reason in report.skipped.items()}
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

        return str(output_path)

    def generate_csv_report(self, report: BenchmarkReport, output_path: str) -> str:
        """
        Generate CSV report with one row per algorithm.

        Args:
            report: Benchmark report
            output_path: Output file path

        Returns:
            Path to generated CSV file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            writer.writeheader()

            for timing in report.timings:
                row = {
                    'version': timing.version,
                    'algorithm': timing.name,
                    'exact': get_algorithm_info(timing.version)['exact'],
                    'matches_reference': timing.matches_reference,
                    'status': 'ran'
                }
                row.update({k: f"{v:.9f}" for k, v in timing.statistics.items()})
                writer.writerow(row)

            for version, reason in sorted(report.skipped.items()):
                info = get_algorithm_info(version)
                writer.writerow({
                    'version': version,
                    'algorithm': info['name'],
                    'exact': info['exact'],
                    'status': f"skipped: {reason}"
                })

        return str(output_path)

    def generate_timing_plot(self, series: Dict[str, List[Tuple[int, float]]],
                             output_path: str, figsize: tuple = (10, 6)) -> str:
        """
        Generate a line plot of elapsed time against n.

        Args:
            series: Algorithm name -> list of (n, seconds)
            output_path: Output image path
            figsize: Figure size tuple

        Returns:
            Path to generated image
        """
        plt.figure(figsize=figsize)

        for name, points in series.items():
            if not points:
                continue
            ns = [p[0] for p in points]
            seconds = [p[1] for p in points]
            sns.lineplot(x=ns, y=seconds, marker='o', label=name)

        plt.title('Fibonacci Calculation Time')
        plt.xlabel('n')
        plt.ylabel('Seconds')
        plt.tight_layout()

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        plt.savefig(output_path, dpi=150, bbox_inches='tight')
        plt.close()

        return str(output_path)

    def summarize(self, result: CalculationResult) -> Dict[str, Any]:
        """Small dictionary describing a single calculation, used for logging"""
        return {
            'n': result.n,
            'algorithm': result.algorithm,
            'digits': result.digits,
            'calculation_seconds': result.timing.elapsed_seconds
        }
