"""Reusable type definitions for bezierclip.

This package provides the foundational numeric types used by the curve
and bounding code, starting with the closed ``Interval``.
"""

from __future__ import annotations

from .interval import EPSILON, Interval, are_near, infinity, intersect, unify

__all__ = ["EPSILON", "Interval", "are_near", "infinity", "intersect", "unify"]
