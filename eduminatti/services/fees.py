"""Fee-range parsing and fee band classification.

School fee ranges are stored as display text such as
``"₹6,50,000 - ₹7,00,000"`` (Indian digit grouping).  The first two rupee
amounts are the lower and upper bound; anything else in the text is ignored.
"""

from __future__ import annotations

import re

from eduminatti.db.models import FeeBand

_RUPEE_AMOUNT = re.compile(r"₹([\d,]+)", re.ASCII)

LOW_FEE_CEILING = 300_000
HIGH_FEE_FLOOR = 500_000


def parse_fee_range(fee_range: str) -> tuple[int, int] | None:
    """Return ``(low, high)`` parsed from *fee_range*, or ``None``.

    ``None`` is returned when fewer than two rupee amounts are present or an
    amount has no digits (e.g. ``"₹,"``).
    """
    amounts: list[int] = []
    for raw in _RUPEE_AMOUNT.findall(fee_range):
        digits = raw.replace(",", "")
        if not digits:
            return None
        amounts.append(int(digits))
        if len(amounts) == 2:
            return amounts[0], amounts[1]
    return None


def mean_fee(fee_range: str) -> float | None:
    """Return the midpoint of *fee_range*, or ``None`` when it cannot be parsed."""
    bounds = parse_fee_range(fee_range)
    if bounds is None:
        return None
    low, high = bounds
    return (low + high) / 2


def classify_fee(mean: float) -> FeeBand:
    """Map a mean annual fee to its :class:`FeeBand`."""
    if mean < LOW_FEE_CEILING:
        return FeeBand.LOW
    if mean <= HIGH_FEE_FLOOR:
        return FeeBand.MEDIUM
    return FeeBand.HIGH


def fee_band(fee_range: str) -> FeeBand | None:
    """Return the band of *fee_range*, or ``None`` if the text is unparseable."""
    mean = mean_fee(fee_range)
    if mean is None:
        return None
    return classify_fee(mean)


def average_fee(fee_range: str) -> float:
    """Return the mean of *fee_range*, or 0 when the text cannot be parsed."""
    mean = mean_fee(fee_range)
    return mean if mean is not None else 0.0
