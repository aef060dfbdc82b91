"""Spread delegated votes over gauges in proportion to their payments."""

import logging
import math
from typing import List

from .data import EpochData, VoteInfo

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1

_log = logging.getLogger(__name__)


def _saturate(value: float, upper: int) -> int:
    """Convert a float to an unsigned integer, clamping and mapping NaN to 0."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= upper:
        return upper
    return int(value)


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def calculate_weights(data: EpochData) -> List[VoteInfo]:
    """Weights and vote counts for each gauge of data, in gauge order."""
    total = sum(gauge.payment for gauge in data.gauges)
    multiplier = _divide(float(U32_MAX - 100), total)
    _log.debug("weight multiplier %s, delegated votes %s", multiplier, data.delegated_votes)
    return [
        VoteInfo(
            gauge=gauge.gauge,
            votes=_saturate(float(data.delegated_votes) * _divide(gauge.payment, total), U64_MAX),
            weight=_saturate(gauge.payment * multiplier, U32_MAX),
        )
        for gauge in data.gauges
    ]