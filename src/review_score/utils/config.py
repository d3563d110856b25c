"""
Configuration Module

Scoring defaults, optionally loaded from a YAML file.

Example config.yaml:

    scoring:
      confidence: 0.99
      digits: 5
      log_level: INFO
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from review_score.errors import InvalidConfig
from review_score.utils.logging import LOG_LEVELS

logger = logging.getLogger(__name__)


class ScoringConfig(BaseModel):
    """Defaults applied when the command line does not override them."""
    confidence: float = Field(
        default=0.95, gt=0, lt=1, description="Confidence level for the lower bound"
    )
    digits: int = Field(
        default=7, ge=1, le=17, description="Significant digits of printed scores"
    )
    log_level: str = Field(default="WARNING", description="Diagnostic log level")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any], source: str = "<dict>") -> 'ScoringConfig':
        """Build a config from a mapping, using its 'scoring' section if present."""
        section = config_dict.get('scoring', config_dict)
        if not isinstance(section, dict):
            raise InvalidConfig(source, "'scoring' must be a mapping")

        try:
            return cls(**section)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise InvalidConfig(source, details) from exc


def load_config(path: Optional[Union[str, Path]] = None) -> ScoringConfig:
    """
    Load scoring defaults.
    
    Args:
        path: YAML file to read. None returns the built-in defaults.
        
    Returns:
        ScoringConfig
        
    Raises:
        InvalidConfig: If the file cannot be read, is not valid YAML
            or holds invalid values
    """
    if path is None:
        return ScoringConfig()
    
    path = Path(path)
    
    if not path.exists():
        logger.warning(f"Config file not found: {path}")
        return ScoringConfig()
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config_dict = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise InvalidConfig(str(path), f"not valid YAML ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise InvalidConfig(str(path), f"not UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise InvalidConfig(str(path), f"cannot be read ({exc.strerror or exc})") from exc
    
    if not isinstance(config_dict, dict):
        raise InvalidConfig(str(path), "top level must be a mapping")
    
    config = ScoringConfig.from_dict(config_dict, source=str(path))
    logger.info(f"Loaded configuration from {path}")
    return config
