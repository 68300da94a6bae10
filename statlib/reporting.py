"""Turn statistic results into report lines and tables.

This module is the presentation boundary: it only consumes ``StatResult``
values and never computes statistics itself.
"""

from __future__ import annotations

from typing import Mapping, Optional

import numpy as np
import pandas as pd

from .result import StatResult

REPORT_COLUMNS = ["Statistic", "Value", "OK", "Error Kind", "Error"]


def format_result(title: str, result: StatResult, precision: Optional[int] = None) -> str:
    """Render one result as ``title=value`` or ``title error: message``.

    Args:
        title (str): Label printed in front of the value.
        result (StatResult): Outcome of a validated statistic.
        precision (int, optional): Fixed number of decimals. When omitted the
            value is printed with ``repr`` precision of a float.

    Returns:
        str: One report line without a trailing newline.
    """
    if not result:
        return f"{title} error: {result.error}"
    value = result.as_float()
    if precision is None:
        return f"{title}={value!r}"
    return f"{title}={value:.{precision}f}"


def results_to_dataframe(results: Mapping[str, StatResult]) -> pd.DataFrame:
    """Collect named results into one row per statistic.

    Args:
        results (Mapping[str, StatResult]): Statistic title to result.

    Returns:
        pandas.DataFrame: Columns ``Statistic``, ``Value`` (``nan`` on
        failure), ``OK``, ``Error Kind`` and ``Error`` (empty strings on
        success), in insertion order.
    """
    rows = []
    for title, result in results.items():
        rows.append(
            {
                "Statistic": title,
                "Value": result.as_float() if result else np.nan,
                "OK": result.ok,
                "Error Kind": result.kind.value if result.kind is not None else "",
                "Error": result.error or "",
            }
        )
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def print_report(
    results: Mapping[str, StatResult],
    precision: Optional[int] = None,
    precisions: Optional[Mapping[str, int]] = None,
):
    """Print one report line per result.

    Args:
        results (Mapping[str, StatResult]): Statistic title to result.
        precision (int, optional): Default number of decimals. Values use
            ``repr`` precision when omitted.
        precisions (Mapping[str, int], optional): Per-title overrides of
            ``precision``.

    Returns:
        None: Write to standard output.
    """
    precisions = precisions or {}
    print("\nStatistics report:")
    if not results:
        print("  (no data)")
        return
    for title, result in results.items():
        print(" - " + format_result(title, result, precisions.get(title, precision)))
