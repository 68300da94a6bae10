"""Reference datasets used by the demo driver and the test suite.

Returns are fractional per-period returns; ``PROFITS`` and ``EMPLOYERS`` are
thirty paired company figures (profit in thousands, head count).
"""

from __future__ import annotations

from typing import Dict, Tuple

RETURNS_A: Tuple[float, ...] = (0.07, 0.09, 0.10)
RETURNS_B: Tuple[float, ...] = (0.085, 0.07, 0.095)
RETURNS_C: Tuple[float, ...] = (0.12, 0.11, 0.10)

SECURITY_X_RETURNS: Tuple[float, ...] = (-0.10, -0.05, 0.00, 0.08, 0.14, 0.20, 0.25)
MARKET_RETURNS: Tuple[float, ...] = (-0.20, -0.10, -0.05, 0.00, 0.10, 0.20, 0.30)

PROFITS: Tuple[int, ...] = (
    300, 9_300, 20_900, 31_000, 41_400,
    47_700, 60_800, 79_500, 80_400, 89_000,
    118_300, 119_700, 153_000, 252_800, 333_300,
    412_000, 424_300, 454_000, 829_000, 86_500,
    176_000, 227_400, 471_300, 681_100, 747_000,
    859_800, 939_500, 1_082_000, 1_102_200, 1_495_400,
)
EMPLOYERS: Tuple[int, ...] = (
    7_523, 8_200, 12_068, 9_500, 5_000,
    18_000, 4_708, 13_740, 95_000, 8_200,
    56_000, 31_404, 8_578, 2_900, 9_100,
    10_200, 9_548, 82_300, 28_334, 40_929,
    50_816, 54_100, 28_200, 83_100, 3_418,
    34_400, 42_100, 8_527, 21_300, 20_100,
)

PRODUCT_SAMPLE: Tuple[int, ...] = (1, 2, 3, 4, 5)
INSECT_COUNT: Tuple[int, ...] = (10, 1, 1000, 1, 10)

# Report title -> (x, y) for every correlation the demo computes.
PAIRED_DATASETS: Dict[str, Tuple[Tuple, Tuple]] = {
    "r_ab": (RETURNS_A, RETURNS_B),
    "r_ac": (RETURNS_A, RETURNS_C),
    "r_bc": (RETURNS_B, RETURNS_C),
    "r_profit_employers": (PROFITS, EMPLOYERS),
}
