import os
import json
from typing import Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from .logic.constants import DEFAULT_LIMIT
from .logic.contracts import RecommendationWeights

load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised when an environment variable holds an unusable value."""


class Settings(BaseModel):
    default_limit: int = DEFAULT_LIMIT
    log_level: str = "INFO"
    weight_overrides: Dict[str, float] = {}

    def weights(self) -> RecommendationWeights:
        return RecommendationWeights().merged(self.weight_overrides)


def load_settings(environ: Optional[Dict[str, str]] = None) -> Settings:
    """
    Read settings from the environment.

    EXAM_REC_DEFAULT_LIMIT  default number of recommendations
    EXAM_REC_LOG_LEVEL      logging level name
    EXAM_REC_WEIGHTS        JSON object of partial weight overrides
    """
    env = os.environ if environ is None else environ

    raw_limit = env.get("EXAM_REC_DEFAULT_LIMIT")
    try:
        default_limit = int(raw_limit) if raw_limit else DEFAULT_LIMIT
    except ValueError:
        raise ConfigurationError(f"EXAM_REC_DEFAULT_LIMIT must be an integer, got {raw_limit!r}")

    raw_weights = env.get("EXAM_REC_WEIGHTS")
    weight_overrides: Dict[str, float] = {}
    if raw_weights:
        try:
            weight_overrides = json.loads(raw_weights)
            # Validate the keys and values against the weights model
            RecommendationWeights().merged(weight_overrides)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            raise ConfigurationError(f"EXAM_REC_WEIGHTS is invalid: {e}")

    return Settings(
        default_limit=default_limit,
        log_level=env.get("EXAM_REC_LOG_LEVEL", "INFO").upper(),
        weight_overrides=weight_overrides,
    )
