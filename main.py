#!/usr/bin/env python3
"""
Demo driver: compute the reference statistics and export them.
"""

# Pipeline overview:
# 1) Correlate the three return series pairwise and profits against head count.
# 2) Compute the covariance of security X returns against market returns.
# 3) Compute the product of the insect-count sample.
# 4) Print the report, write the CSV summary and render scatter figures.

import argparse
import logging
import sys
import time

from statlib.datasets import (
    INSECT_COUNT,
    MARKET_RETURNS,
    PAIRED_DATASETS,
    SECURITY_X_RETURNS,
)
from statlib.output import DEFAULT_OUTPUT_DIR, save_results_to_csv
from statlib.plotting import plot_paired_series
from statlib.reporting import print_report, results_to_dataframe
from statlib.result import StatResult
from statlib.stats import coefficient_correlation, covariance, product

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Decimals used by the original demo output; other titles print at full precision.
REPORT_PRECISION = {"cov_xy": 2, "product_insect_count": 2}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Compute reference covariance and correlation statistics."
    )
    parser.add_argument(
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help="Directory for the CSV summary and figures (default: %(default)s).",
    )
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip rendering scatter figures."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log intermediate sums of every statistic.",
    )
    parser.add_argument(
        "--log-file",
        default="statlib.log",
        help="Path of the log file (default: %(default)s).",
    )
    return parser.parse_args(argv)


def compute_reference_statistics(verbose: bool = False) -> dict:
    """Compute every statistic of the demo, keyed by report title."""
    results = {}
    for title, (x, y) in PAIRED_DATASETS.items():
        results[title] = coefficient_correlation(x, y, verbose=verbose)
    results["cov_xy"] = covariance(SECURITY_X_RETURNS, MARKET_RETURNS, verbose=verbose)
    results["product_insect_count"] = StatResult.success(product(INSECT_COUNT))
    return results


def configure_logging(log_file: str) -> list:
    """Attach stdout and file handlers to the root logger and return them."""
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(log_file, mode="w"),
    ]
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return handlers


def main(argv=None):
    """Run the demo and return a process exit code."""
    args = parse_args(argv)
    handlers = configure_logging(args.log_file)
    try:
        return run(args)
    finally:
        root = logging.getLogger()
        for handler in handlers:
            root.removeHandler(handler)
            handler.close()


def run(args):
    start_time = time.time()
    logging.info("Computing reference statistics")
    results = compute_reference_statistics(verbose=args.verbose)

    failed = [title for title, res in results.items() if not res]
    for title in failed:
        logging.error("%s failed: %s", title, results[title].error)

    print_report(results, precisions=REPORT_PRECISION)

    results_df = results_to_dataframe(results)
    csv_path = save_results_to_csv(results_df, args.output_dir)

    plot_paths = []
    if not args.no_plots:
        for title, (x, y) in PAIRED_DATASETS.items():
            plot_paths.append(
                plot_paired_series(x, y, title, args.output_dir, result=results[title])
            )
        logging.info("Generated %d scatter figures", len(plot_paths))

    total_duration = time.time() - start_time
    logging.info("Total execution time: %.2f seconds", total_duration)
    logging.info("Generated output files:")
    logging.info("  - Statistics summary CSV: %s", csv_path)
    for path in plot_paths:
        logging.info("  - Scatter figure: %s", path)

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
