from collections.abc import Iterable
from functools import reduce

import numpy as np

__all__ = ["ADD_LOGS_MAX_DIFF", "add_log", "sum_logs"]

ADD_LOGS_MAX_DIFF = float(np.log2(100.0))


def add_log(logx: float, logy: float) -> float:
    """Add two probabilities given as base 2 logarithms.

    Given ``logx = log2(x)`` and ``logy = log2(y)``, return ``log2(x + y)``
    without computing ``x`` or ``y`` directly, so that very small or very
    large magnitudes do not underflow or overflow.

    Args:
        logx: Base 2 logarithm of the first value.
        logy: Base 2 logarithm of the second value.

    Returns:
        Base 2 logarithm of the sum.

    Examples:
        >>> add_log(3.0, 3.0)
        4.0
        >>> round(2 ** add_log(np.log2(0.25), np.log2(0.5)), 10)
        0.75
        >>> add_log(-2000.0, -1.0)  # far below the larger term
        -1.0
    """
    if logx - logy > ADD_LOGS_MAX_DIFF:
        return float(logx)
    if logy - logx > ADD_LOGS_MAX_DIFF:
        return float(logy)

    base = min(logx, logy)
    return float(base + np.log2(np.exp2(logx - base) + np.exp2(logy - base)))


def sum_logs(logs: Iterable[float]) -> float:
    """Sum any number of probabilities given as base 2 logarithms.

    Args:
        logs: Base 2 logarithms of the values to add.

    Returns:
        Base 2 logarithm of the sum of the values.

    Raises:
        ValueError: If ``logs`` is empty.

    Examples:
        >>> sum_logs([1.0, 1.0, 2.0])
        3.0
        >>> sum_logs([-5.0])
        -5.0
    """
    logs = list(logs)
    if not logs:
        raise ValueError("Cannot sum an empty sequence of logarithms")

    return float(reduce(add_log, logs))
