"""
Linearly spaced numeric sequences, e.g. a strike ladder or a maturity grid.
"""

import numpy as np
from typing import List

from options_sheet.errors import InvalidParameterError, ZeroRowCountError
from options_sheet.logger import get_logger

logger = get_logger(__name__)


def _interval_count(rows: float) -> int:
    """Validate the row count and return it as an int."""
    if isinstance(rows, bool) or not np.isfinite(rows):
        raise InvalidParameterError(f"rows must be a finite number, got {rows!r}")
    if rows == 0:
        raise ZeroRowCountError("rows must be at least 1, got 0")
    if rows < 0:
        raise InvalidParameterError(f"rows must be positive, got {rows}")
    if not float(rows).is_integer():
        raise InvalidParameterError(f"rows must be a whole number, got {rows}")
    return int(rows)


def set_sequence(start: float, end: float, rows: float) -> List[float]:
    """
    Generate evenly spaced values from ``start`` to ``end`` inclusive.

    ``rows`` is the number of intervals, so ``rows + 1`` values are returned
    with step ``(end - start) / rows``. Both endpoints are exact. A range
    with ``start == end`` collapses to ``[start]``; ``end < start`` gives a
    descending sequence.

    Args:
        start: First value
        end: Last value
        rows: Number of intervals between start and end

    Returns:
        List of floats

    Raises:
        ZeroRowCountError: rows is 0
        InvalidParameterError: rows is negative or fractional, or an
            endpoint is not finite
    """
    for name, value in (('start', start), ('end', end)):
        if not np.isfinite(value):
            raise InvalidParameterError(f"{name} must be a finite number, got {value}")

    intervals = _interval_count(rows)

    if start == end:
        return [float(start)]

    values = np.linspace(start, end, intervals + 1)
    logger.debug(f"Sequence {start} -> {end}: {intervals} intervals, step {values[1] - values[0]}")
    return values.tolist()
