"""Write result tables to CSV files."""

from __future__ import annotations

import logging
import os

import pandas as pd

from .reporting import REPORT_COLUMNS

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"


def save_results_to_csv(
    results_df: pd.DataFrame,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    filename: str = "statistics_summary.csv",
) -> str:
    """Save a result table produced by ``results_to_dataframe``.

    Args:
        results_df (pandas.DataFrame): Table with the report columns.
        output_dir (str): Directory for the CSV; created if missing.
        filename (str): Name of the CSV file.

    Returns:
        str: Path of the written file.

    Raises:
        ValueError: If ``results_df`` lacks any report column.
    """
    missing = [c for c in REPORT_COLUMNS if c not in results_df.columns]
    if missing:
        raise ValueError(f"Result table missing required columns: {missing}")

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    results_df[REPORT_COLUMNS].to_csv(path, index=False)
    logger.info("Saved statistics summary to %s", path)
    return path
