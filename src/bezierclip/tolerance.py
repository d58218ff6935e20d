"""
Near-equality tolerance for bezierclip.

Resolves the default epsilon used by ``are_near`` with layered
precedence: explicit argument > environment variable > config file >
built-in default (``EPSILON``).
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path

from bezierclip.config import Config
from bezierclip.exceptions import ConfigError

__all__ = [
    "EPSILON",
    "EPSILON_ENV_VAR",
    "get_default_epsilon",
    "set_current_epsilon",
    "get_current_epsilon",
    "load_current_epsilon",
]

logger = logging.getLogger(__name__)

EPSILON = 1e-5

# Environment variable for the tolerance override
EPSILON_ENV_VAR = "BEZIERCLIP_EPSILON"


def _epsilon_from_env() -> float | None:
    raw = os.environ.get(EPSILON_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {EPSILON_ENV_VAR}={raw!r}: not a number")
        return None
    if math.isnan(value) or value < 0:
        logger.warning(f"Ignoring {EPSILON_ENV_VAR}={raw!r}: must be a non-negative number")
        return None
    return value


def get_default_epsilon(
    explicit: float | None = None,
    config: Config | None = None,
) -> float:
    """Resolve the tolerance based on precedence: explicit > env > config > default.

    Args:
        explicit: Tolerance passed by the caller (highest priority)
        config: Config object to read ``interval.epsilon`` from

    Returns:
        The resolved non-negative tolerance
    """
    # Priority 1: explicit argument
    if explicit is not None:
        return explicit

    # Priority 2: environment variable
    value = _epsilon_from_env()
    if value is not None:
        return value

    # Priority 3: config file
    if config is not None:
        return config.interval.epsilon

    # Priority 4: built-in default
    return EPSILON


# Process-wide tolerance (set during application start-up)
_current_epsilon: float | None = None


def set_current_epsilon(epsilon: float | None) -> None:
    """Set the process-wide tolerance used by ``are_near``.

    Args:
        epsilon: Non-negative tolerance, or None to re-resolve it from the
            environment on the next lookup

    Raises:
        ConfigError: If epsilon is negative or NaN
    """
    global _current_epsilon
    if epsilon is not None and not epsilon >= 0:
        raise ConfigError(
            "Tolerance must be a non-negative number",
            context={"epsilon": epsilon},
        )
    _current_epsilon = epsilon


def get_current_epsilon() -> float:
    """Get the process-wide tolerance.

    The first lookup without a prior ``set_current_epsilon`` resolves
    environment > default once and keeps the result.
    """
    global _current_epsilon
    if _current_epsilon is None:
        _current_epsilon = get_default_epsilon()
    return _current_epsilon


def load_current_epsilon(start_dir: Path | None = None) -> float:
    """Load config files and install the resolved tolerance process-wide.

    Call once during application start-up to make ``[interval] epsilon``
    apply to ``are_near``.

    Args:
        start_dir: Directory to start the project config search from

    Returns:
        The tolerance now in effect
    """
    epsilon = get_default_epsilon(config=Config.load(start_dir))
    set_current_epsilon(epsilon)
    return epsilon
