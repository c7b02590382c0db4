"""
runtime settings shared by every container.

the random source used by shuffle / pick_random / remove_random lives here so
that a single seed makes all of them reproducible.
"""
import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

SEED_ENV_VAR = 'RHEY_SEED'


@dataclass(frozen=True)
class Settings:
    # build filter masks with numpy when the data is homogeneous int/float
    vectorize: bool = True
    # None means an unseeded, non-reproducible source
    seed: Optional[int] = None


def _seed_from_env() -> Optional[int]:
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"ignoring non-integer {SEED_ENV_VAR}={raw!r}")
        return None


_settings = Settings(seed=_seed_from_env())
_rng = np.random.default_rng(_settings.seed)


def get_settings() -> Settings:
    """the active settings"""
    return _settings


def configure(**changes) -> Settings:
    """
    replace one or more settings and return the new settings object.
    passing seed (even the same value) reseeds the shared random source.
    """
    global _settings, _rng
    _settings = replace(_settings, **changes)
    if 'seed' in changes:
        _rng = np.random.default_rng(_settings.seed)
        logger.debug(f"random source reseeded with {_settings.seed!r}")
    return _settings


def reset() -> Settings:
    """restore default settings and an unseeded random source"""
    global _settings, _rng
    _settings = Settings()
    _rng = np.random.default_rng()
    return _settings


def random_index(upper: int) -> int:
    """uniform integer in [0, upper) from the shared random source"""
    return int(_rng.integers(0, upper))
