"""Log-normal scoring of raw metric values.

Responsibilities:
- Map an unbounded non-negative metric value to a score in [0, 1].
- Validate the `(podr, median)` calibration pair shared by every metric audit.

The metric is modelled as log-normally distributed with its median at
`median` and its cumulative distribution reaching `1 - PODR_GOOD_PROBABILITY`
at `podr`. The score is the upper-tail probability, so `podr` scores 0.9 and
`median` scores 0.5 for every metric audit in the suite.
"""

from __future__ import annotations

import math
from statistics import NormalDist

from .errors import CalibrationError


PODR_GOOD_PROBABILITY = 0.9
_PODR_STANDARD_SCORE = NormalDist().inv_cdf(PODR_GOOD_PROBABILITY)


def validate_calibration(podr: float, median: float) -> None:
    """Fail fast unless `median > podr > 0` with both values finite.

    Raises:
        CalibrationError: If the calibration pair cannot define a distribution.
    """

    if not (math.isfinite(podr) and math.isfinite(median)):
        raise CalibrationError(
            f"Calibration values must be finite (podr={podr!r}, median={median!r})."
        )
    if podr <= 0:
        raise CalibrationError(f"Calibration `podr` must be positive, got {podr!r}.")
    if median <= podr:
        raise CalibrationError(
            f"Calibration `median` ({median!r}) must be greater than `podr` ({podr!r})."
        )


def log_normal_parameters(podr: float, median: float) -> tuple[float, float]:
    """Return `(location, shape)` of the log-normal fitted to a calibration pair."""

    validate_calibration(podr, median)
    location = math.log(median)
    shape = math.log(median / podr) / _PODR_STANDARD_SCORE
    return location, shape


def clamp_to_two_decimals(value: float) -> float:
    """Round half-up to two decimals, the precision scores are reported with."""

    return math.floor(value * 100 + 0.5) / 100


def compute_log_normal_score(value: float, podr: float, median: float) -> float:
    """Score a metric value against a `(podr, median)` calibration.

    Args:
        value: Measured metric value; lower is better.
        podr: Point of diminishing returns, scored `PODR_GOOD_PROBABILITY`.
        median: Typical measurement, scored 0.5.

    Returns:
        Score clamped to [0, 1] and rounded to two decimals.

    Raises:
        ValueError: If `value` is negative or NaN.
        CalibrationError: If the calibration violates `median > podr > 0`.
    """

    if math.isnan(value) or value < 0:
        raise ValueError(f"Metric value must be non-negative, got {value!r}.")
    location, shape = log_normal_parameters(podr, median)
    if value == 0:
        return 1.0

    distribution = NormalDist(mu=location, sigma=shape)
    score = 1.0 - distribution.cdf(math.log(value))
    score = min(1.0, max(0.0, score))
    return clamp_to_two_decimals(score)
