"""
Utility Module

Common utilities for configuration and logging.
"""

from review_score.utils.config import (
    ScoringConfig,
    load_config
)

from review_score.utils.logging import (
    LOG_LEVELS,
    setup_logging,
    get_logger
)

__all__ = [
    'ScoringConfig',
    'load_config',
    'LOG_LEVELS',
    'setup_logging',
    'get_logger',
]
