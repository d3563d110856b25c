"""
Estimators Module

Lower-bound confidence estimates for rating data.

Two estimators are provided:
    - wilson_score: binomial data (e.g. upvotes out of total votes)
    - ordinal_score: ordinal data (e.g. counts of 1..5 star ratings)

Both penalise small samples, so an item with few ratings ranks below an
item with many ratings and the same raw average.
"""

import logging
import math
from typing import Sequence

import numpy as np
from scipy import stats

from review_score.errors import (
    InvalidArgumentCount,
    InvalidConfidence,
    InvalidRatingData,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.95


def check_confidence(confidence: float) -> float:
    """Return confidence as a float, raising InvalidConfidence outside (0, 1)."""
    try:
        value = float(confidence)
    except (TypeError, ValueError):
        raise InvalidConfidence(confidence) from None

    if not math.isfinite(value) or not 0.0 < value < 1.0:
        raise InvalidConfidence(confidence)
    return value


def z_score(confidence: float = DEFAULT_CONFIDENCE) -> float:
    """
    Two-sided standard normal quantile for a confidence level.

    Args:
        confidence: Confidence level in (0, 1)

    Returns:
        z such that P(-z < Z < z) == confidence
    """
    confidence = check_confidence(confidence)
    return float(stats.norm.ppf(1 - (1 - confidence) / 2))


def wilson_score(
    positive: float,
    total: float,
    confidence: float = DEFAULT_CONFIDENCE
) -> float:
    """
    Lower bound of the Wilson score interval for a binomial proportion.

    Args:
        positive: Count of positive cases (e.g. upvotes)
        total: Count of all cases (e.g. upvotes + downvotes)
        confidence: Confidence level in (0, 1)

    Returns:
        Conservative estimate of the true positive proportion, in [0, 1]

    Raises:
        InvalidRatingData: If total <= 0, positive < 0 or positive > total
        InvalidConfidence: If confidence is outside (0, 1)

    Example:
        >>> round(wilson_score(314, 341), 7)
        0.8872512
    """
    if total <= 0:
        raise InvalidRatingData(f"Total count must be positive (got {total})")
    if positive < 0:
        raise InvalidRatingData(f"Positive count must be non-negative (got {positive})")
    if positive > total:
        raise InvalidRatingData(
            f"Positive count ({positive}) must be equal to or less than total ({total})"
        )

    z = z_score(confidence)
    n = float(total)
    phat = positive / n

    score = (
        phat
        + z ** 2 / (2 * n)
        - z * math.sqrt((phat * (1 - phat) + z ** 2 / (4 * n)) / n)
    ) / (1 + z ** 2 / n)

    logger.debug(f"wilson_score(positive={positive}, total={total}, z={z:.6f}) = {score}")
    return score


def ordinal_score(
    levels: Sequence[float],
    confidence: float = DEFAULT_CONFIDENCE
) -> float:
    """
    Lower bound of a Bayesian approximation of the mean ordinal rating.

    Each count receives one pseudo-rating (add-one smoothing) so that empty
    levels never collapse the variance to zero.

    Args:
        levels: Number of ratings per level, in ascending order of level
            (e.g. [5, 4, 1] means five 1-star, four 2-star, one 3-star)
        confidence: Confidence level in (0, 1)

    Returns:
        Conservative estimate of the true mean rating on the 1..K scale

    Raises:
        InvalidArgumentCount: If fewer than two levels are given
        InvalidRatingData: If any count is negative or all counts are zero
        InvalidConfidence: If confidence is outside (0, 1)

    Example:
        >>> round(ordinal_score([4, 6, 35, 45, 25]), 6)
        3.495104
    """
    counts = np.asarray(levels, dtype=float)

    if counts.ndim != 1 or counts.size < 2:
        raise InvalidArgumentCount(
            f"Ordinal scoring needs at least two rating levels (got {counts.size})"
        )
    if np.any(counts < 0):
        raise InvalidRatingData("Rating counts must be non-negative")

    n_ratings = counts.sum()
    if n_ratings <= 0:
        raise InvalidRatingData("At least one rating is required; all counts are zero")

    z = z_score(confidence)
    k = counts.size
    ranks = np.arange(1, k + 1)
    weights = (counts + 1) / (n_ratings + k)

    sum1 = float(np.sum(ranks * weights))
    sum2 = float(np.sum(ranks ** 2 * weights))

    score = sum1 - z * math.sqrt((sum2 - sum1 ** 2) / (n_ratings + k + 1))

    logger.debug(f"ordinal_score(K={k}, N={n_ratings:g}, mean={sum1:.6f}, z={z:.6f}) = {score}")
    return score
