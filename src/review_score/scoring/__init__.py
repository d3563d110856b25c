"""
Scoring Module

Confidence-adjusted rating estimators and the argument dispatcher.
"""

from review_score.scoring.estimators import (
    DEFAULT_CONFIDENCE,
    check_confidence,
    z_score,
    wilson_score,
    ordinal_score
)

from review_score.scoring.dispatcher import (
    Scorer,
    ResolvedArguments,
    ScoreResult,
    resolve_arguments,
    dispatch,
    score
)

__all__ = [
    # Estimators
    'DEFAULT_CONFIDENCE',
    'check_confidence',
    'z_score',
    'wilson_score',
    'ordinal_score',

    # Dispatch
    'Scorer',
    'ResolvedArguments',
    'ScoreResult',
    'resolve_arguments',
    'dispatch',
    'score',
]
