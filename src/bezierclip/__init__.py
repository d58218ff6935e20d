"""
bezierclip: interval primitives for 2D curve bounding.

Modules:
    types: Closed ``Interval`` type and interval arithmetic helpers
    tolerance: Default tolerance for approximate comparisons
    config: Project and user configuration files
    exceptions: Error hierarchy

Quick Start::

    from bezierclip import Interval, unify

    xs = Interval.from_array([0.0, 2.5, 1.0])
    ys = Interval(-1.0, 1.0)
    hull = unify(xs, ys)
    hull.expand_by(0.1)
"""

__version__ = "0.1.0"

from bezierclip.exceptions import (
    BezierClipError,
    BoundIndexError,
    ConfigError,
    EmptySequenceError,
    PreconditionError,
)
from bezierclip.types import EPSILON, Interval, are_near, infinity, intersect, unify

__all__ = [
    # Version
    "__version__",
    # Types
    "EPSILON",
    "Interval",
    "are_near",
    "infinity",
    "intersect",
    "unify",
    # Exceptions
    "BezierClipError",
    "PreconditionError",
    "BoundIndexError",
    "EmptySequenceError",
    "ConfigError",
]
