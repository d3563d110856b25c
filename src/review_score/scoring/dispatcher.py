"""
Dispatcher Module

Turns raw command-line tokens into validated estimator arguments and
routes them to the matching estimator.

Token layout:
    <scorer> <number> <number> [<number> ...] [--conf=<decimal>]

All validation happens in resolve_arguments(), before any estimator runs.
"""

import logging
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from review_score.errors import (
    InvalidArgumentCount,
    InvalidConfidence,
    InvalidMode,
    InvalidNumericInput,
    InvalidRatingData,
)
from review_score.scoring.estimators import (
    DEFAULT_CONFIDENCE,
    check_confidence,
    ordinal_score,
    wilson_score,
)

logger = logging.getLogger(__name__)

CONF_OPTION = "--conf"
CONF_PATTERN = re.compile(r"^--conf(?:=(?P<value>.*))?$")

MAX_WILSON_ARGS = 3
MIN_NUMERIC_ARGS = 2


class Scorer(Enum):
    """Available estimators."""
    WILSON = "wilson"
    ORDINAL = "ordinal"

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, name: str) -> "Scorer":
        """Map a CLI token to a Scorer, raising InvalidMode if unknown."""
        try:
            return cls(name)
        except ValueError:
            raise InvalidMode(name, cls.names()) from None


@dataclass(frozen=True)
class ResolvedArguments:
    """
    Validated estimator input.

    Attributes:
        scorer: Estimator to run
        values: Normalised numbers; (positive, total) for Wilson,
            per-level counts for ordinal
        confidence: Confidence level in (0, 1)
    """
    scorer: Scorer
    values: Tuple[float, ...]
    confidence: float = DEFAULT_CONFIDENCE


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of a single scoring run."""
    scorer: Scorer
    score: float
    confidence: float
    n_ratings: float

    def format(self, digits: int = 7) -> str:
        """Render the score with the given number of significant digits."""
        return f"{self.score:.{digits}g}"

    def __str__(self):
        return self.format()


def _is_integral(value: float) -> bool:
    return math.isfinite(value) and value == int(value)


def _extract_confidence(
    tokens: Sequence[str],
    default: float
) -> Tuple[List[str], float]:
    """Remove --conf tokens from the stream and return the confidence to use."""
    remaining = []
    raw_value: Optional[str] = None
    seen = False

    for token in tokens:
        match = CONF_PATTERN.match(token)
        if match is None:
            remaining.append(token)
            continue
        seen = True
        raw_value = match.group("value")

    if not seen:
        return remaining, check_confidence(default)

    if not raw_value:
        raise InvalidConfidence(raw_value, option=CONF_OPTION)

    try:
        confidence = check_confidence(raw_value)
    except InvalidConfidence:
        raise InvalidConfidence(raw_value, option=CONF_OPTION) from None

    logger.debug(f"Confidence override: {confidence}")
    return remaining, confidence


def _to_numbers(tokens: Sequence[str]) -> List[float]:
    numbers = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            raise InvalidNumericInput(
                f"All arguments must be numeric (got {token!r})"
            ) from None
        if not math.isfinite(value):
            raise InvalidNumericInput(f"All arguments must be finite numbers (got {token!r})")
        numbers.append(value)
    return numbers


def _resolve_wilson(numbers: List[float]) -> Tuple[float, float]:
    if len(numbers) > MAX_WILSON_ARGS:
        raise InvalidArgumentCount(
            f"Maximum of {MAX_WILSON_ARGS} arguments accepted for Wilson scoring "
            f"(got {len(numbers)})"
        )
    if len(numbers) == MAX_WILSON_ARGS:
        logger.warning(f"Ignoring unused third Wilson argument: {numbers[2]:g}")

    first, total = numbers[0], numbers[1]

    if total <= 0 or not _is_integral(total):
        raise InvalidRatingData(f"Total count must be a positive whole number (got {total:g})")

    # Non-integral first argument is a proportion of total
    if _is_integral(first):
        positive = first
    else:
        positive = float(round(first * total))
        logger.info(f"Interpreting {first:g} as a proportion: {positive:g} of {total:g}")

    if positive < 0:
        raise InvalidRatingData(f"Positive count must be non-negative (got {positive:g})")
    if positive > total:
        raise InvalidRatingData(
            f"Positive count ({positive:g}) must be equal to or less than total ({total:g})"
        )

    return positive, total


def _resolve_ordinal(numbers: List[float]) -> Tuple[float, ...]:
    if not any(_is_integral(value) for value in numbers):
        raise InvalidNumericInput("All arguments must be integers")
    if any(value < 0 for value in numbers):
        raise InvalidRatingData("Rating counts must be non-negative")
    if sum(numbers) <= 0:
        raise InvalidRatingData("At least one rating is required; all counts are zero")

    return tuple(numbers)


def resolve_arguments(
    tokens: Sequence[str],
    default_confidence: float = DEFAULT_CONFIDENCE
) -> ResolvedArguments:
    """
    Validate raw tokens and normalise them for an estimator.

    Args:
        tokens: Scorer name followed by numeric tokens and an optional
            --conf=<decimal> token, in any position after the name
        default_confidence: Confidence used when no --conf token is given

    Returns:
        ResolvedArguments ready for dispatch()

    Raises:
        InvalidArgument: Any subclass describing the first problem found
    """
    if not tokens:
        raise InvalidArgumentCount(
            "No scorer given. First argument must be one of: " + ", ".join(Scorer.names())
        )

    scorer = Scorer.parse(tokens[0])
    remaining, confidence = _extract_confidence(tokens[1:], default_confidence)
    numbers = _to_numbers(remaining)

    if len(numbers) < MIN_NUMERIC_ARGS:
        raise InvalidArgumentCount(
            f"Must provide at least {MIN_NUMERIC_ARGS} numeric arguments (got {len(numbers)})"
        )

    if scorer is Scorer.WILSON:
        values = _resolve_wilson(numbers)
    elif scorer is Scorer.ORDINAL:
        values = _resolve_ordinal(numbers)
    else:
        raise InvalidMode(scorer.value, Scorer.names())

    resolved = ResolvedArguments(scorer=scorer, values=tuple(values), confidence=confidence)
    logger.debug(f"Resolved arguments: {resolved}")
    return resolved


def dispatch(resolved: ResolvedArguments) -> ScoreResult:
    """Run the estimator selected by resolved.scorer."""
    if resolved.scorer is Scorer.WILSON:
        positive, total = resolved.values
        value = wilson_score(positive, total, resolved.confidence)
        n_ratings = total
    elif resolved.scorer is Scorer.ORDINAL:
        value = ordinal_score(resolved.values, resolved.confidence)
        n_ratings = sum(resolved.values)
    else:
        raise InvalidMode(resolved.scorer.value, Scorer.names())

    result = ScoreResult(
        scorer=resolved.scorer,
        score=value,
        confidence=resolved.confidence,
        n_ratings=n_ratings
    )
    logger.info(
        f"{result.scorer.value} score over {n_ratings:g} ratings "
        f"at {result.confidence:g} confidence: {result.score}"
    )
    return result


def score(
    tokens: Sequence[str],
    default_confidence: float = DEFAULT_CONFIDENCE
) -> ScoreResult:
    """Convenience function: resolve tokens and run the selected estimator."""
    return dispatch(resolve_arguments(tokens, default_confidence))
