"""Closed interval type for curve bounding and interval arithmetic.

Provides a mutable ``Interval`` holding two float bounds ``[min, max]``.
An interval with ``min > max`` is empty; the canonical empty interval is
``[+inf, -inf]`` so that extending or unioning it adopts the other
operand without special cases.

Numeric degeneration is never an error: infinite or NaN bounds propagate
as IEEE results, and dividing by a zero scalar yields infinities.

Example::

    from bezierclip.types import Interval, unify

    xs = Interval.from_array([3.0, 1.0, 4.0, 1.0, 5.0])   # [1, 5]
    xs.extend_to(7.0)                                     # [1, 7]
    xs.contains(2.5)                                      # True

    acc = Interval()                                      # empty
    acc.union_with(Interval(2, 3))                        # [2, 3]

    Interval(-2, 3) * Interval(-1, 4)                     # [-8, 12]
    unify(Interval(0, 1), Interval(4, 5))                 # [0, 5]
"""

from __future__ import annotations

import logging
import math
from numbers import Integral, Real
from typing import Any

import numpy as np

from bezierclip.exceptions import BoundIndexError, EmptySequenceError, PreconditionError
from bezierclip.tolerance import EPSILON, get_current_epsilon

logger = logging.getLogger(__name__)


def infinity() -> float:
    """Positive infinity, the lower bound of the canonical empty interval."""
    return math.inf


def are_near(a: float, b: float, eps: float | None = None) -> bool:
    """Return True if ``|a - b| <= eps``.

    Args:
        a: First value.
        b: Second value.
        eps: Tolerance. When omitted the process-wide tolerance from
            ``bezierclip.tolerance.get_current_epsilon()`` is used.
    """
    if eps is None:
        eps = get_current_epsilon()
    return abs(a - b) <= eps


def _divide(value: float, divisor: float) -> float:
    # Python floats raise on x / 0; interval scaling follows IEEE instead.
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(value) / np.float64(divisor))


def _check_index(index: int) -> None:
    # bool and float compare equal to 0 and 1 but are not bound indices
    if isinstance(index, bool) or not isinstance(index, Integral) or index not in (0, 1):
        msg = "Interval bound index out of range"
        raise BoundIndexError(
            msg,
            context={"valid": "0 (min) or 1 (max)"},
            suggestions=["Use the min and max properties for named access"],
            index=index,
        )


class Interval:
    """A closed interval ``[min, max]`` of floats.

    ``Interval()`` is the canonical empty interval, ``Interval(u)`` the
    single point ``[u, u]`` and ``Interval(u, v)`` spans ``u`` and ``v`` in
    either order.

    Intervals are mutable values: the mutators (``set_min``,
    ``extend_to``, ``union_with``, in-place operators, ...) change the
    instance, so they are not hashable. Use ``copy()`` for an independent
    value.
    """

    __slots__ = ("_lo", "_hi")

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, u: float | None = None, v: float | None = None) -> None:
        if u is None:
            if v is not None:
                msg = "Interval() got an upper bound without a lower bound"
                raise TypeError(msg)
            self._lo = math.inf
            self._hi = -math.inf
        elif v is None:
            self._lo = self._hi = float(u)
        elif u < v:
            self._lo = float(u)
            self._hi = float(v)
        else:
            self._lo = float(v)
            self._hi = float(u)

    # ------------------------------------------------------------------
    # Factory methods
    # ------------------------------------------------------------------

    @classmethod
    def _from_bounds(cls, lo: float, hi: float) -> Interval:
        """Build from raw bounds without normalizing (keeps emptiness)."""
        result = cls.__new__(cls)
        result._lo = lo
        result._hi = hi
        return result

    @classmethod
    def empty(cls) -> Interval:
        """Return the canonical empty interval ``[+inf, -inf]``."""
        return cls()

    @classmethod
    def from_array(cls, values: Any, n: int | None = None) -> Interval:
        """Create the smallest interval enclosing a set of values.

        The first value seeds a single-point interval and every further
        value is added with ``extend_to``, so NaN entries after the first
        are ignored.

        Args:
            values: Sequence or array of numbers. Multi-dimensional arrays
                are flattened.
            n: Use only the first ``n`` values (default: all of them).

        Returns:
            Interval spanning the smallest and largest value.

        Raises:
            EmptySequenceError: If there are no values to enclose.
            PreconditionError: If ``n`` exceeds the number of values.

        Example::

            Interval.from_array([3, 1, 4, 1, 5])
            # Interval(1.0, 5.0)
        """
        samples = np.asarray(values, dtype=np.float64).ravel()
        if n is not None:
            if n > samples.size:
                msg = "Requested more values than were supplied"
                raise PreconditionError(msg, context={"n": n, "available": samples.size})
            samples = samples[: max(n, 0)]
        if samples.size == 0:
            msg = "Cannot build an interval from an empty sequence"
            raise EmptySequenceError(
                msg,
                context={"n": n if n is not None else 0},
                suggestions=["Use Interval() for the empty interval"],
            )

        result = cls(float(samples[0]))
        rest = samples[1:]
        nan_mask = np.isnan(rest)
        if nan_mask.any():
            logger.debug(f"from_array skipped {int(nan_mask.sum())} NaN value(s)")
            rest = rest[~nan_mask]
        if rest.size:
            result.extend_to(float(rest.min()))
            result.extend_to(float(rest.max()))
        return result

    def copy(self) -> Interval:
        """Return an independent copy."""
        return Interval._from_bounds(self._lo, self._hi)

    def __copy__(self) -> Interval:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Interval:
        return self.copy()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def min(self) -> float:
        """Lower bound."""
        return self._lo

    @property
    def max(self) -> float:
        """Upper bound."""
        return self._hi

    @property
    def bounds(self) -> tuple[float, float]:
        """``(min, max)`` pair."""
        return (self._lo, self._hi)

    @property
    def extent(self) -> float:
        """Width of the interval (``max - min``); negative when empty."""
        return self._hi - self._lo

    @property
    def middle(self) -> float:
        """Midpoint of the interval."""
        return (self._hi + self._lo) * 0.5

    @property
    def is_empty(self) -> bool:
        """True if ``min > max``."""
        return self._lo > self._hi

    # ------------------------------------------------------------------
    # Bound access
    # ------------------------------------------------------------------

    def __getitem__(self, index: int) -> float:
        _check_index(index)
        return self._lo if index == 0 else self._hi

    def set_bound(self, index: int, value: float) -> None:
        """Overwrite bound ``index`` (0 = min, 1 = max) without any check.

        Unlike ``set_min``/``set_max`` this never reorders the bounds, so
        the caller may leave the interval inverted (and therefore empty).

        Raises:
            BoundIndexError: If ``index`` is not 0 or 1.
        """
        _check_index(index)
        if index == 0:
            self._lo = value
        else:
            self._hi = value
        if self._lo > self._hi and logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"set_bound({index}, {value!r}) left interval inverted: {self!r}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, value: float | Interval) -> bool:
        """Return True if *value* lies within ``[min, max]``.

        For an ``Interval`` argument both of its bounds must lie within
        this interval. Emptiness gets no special treatment: the result is
        a plain comparison of bounds.
        """
        if isinstance(value, Interval):
            return self._lo <= value._lo and value._hi <= self._hi
        return self._lo <= value <= self._hi

    def __contains__(self, value: float | Interval) -> bool:
        return self.contains(value)

    def intersects(self, other: Interval) -> bool:
        """Return True if this interval and *other* share any points.

        Always False when either interval is empty.
        """
        if self.is_empty or other.is_empty:
            return False
        return self.contains(other._lo) or self.contains(other._hi) or other.contains(self)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_min(self, value: float) -> None:
        """Set the lower bound.

        If *value* exceeds the current max the interval wraps: the old max
        becomes the min and *value* the new max.
        """
        if value > self._hi:
            self._lo = self._hi
            self._hi = value
        else:
            self._lo = value

    def set_max(self, value: float) -> None:
        """Set the upper bound.

        If *value* is below the current min the interval wraps: the old min
        becomes the max and *value* the new min.
        """
        if value < self._lo:
            self._hi = self._lo
            self._lo = value
        else:
            self._hi = value

    def extend_to(self, value: float) -> None:
        """Grow the interval to include *value*. NaN is ignored."""
        if value < self._lo:
            self._lo = value
        # no elif: the empty interval needs both bounds set
        if value > self._hi:
            self._hi = value

    def expand_by(self, amount: float) -> None:
        """Move both bounds outward by *amount* (inward if negative)."""
        self._lo -= amount
        self._hi += amount

    def union_with(self, other: Interval) -> None:
        """Grow the interval to cover *other*."""
        if other._lo < self._lo:
            self._lo = other._lo
        if other._hi > self._hi:
            self._hi = other._hi

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _scaled(self, factor: float, divide: bool = False) -> tuple[float, float]:
        if divide:
            lo, hi = _divide(self._lo, factor), _divide(self._hi, factor)
        else:
            lo, hi = self._lo * factor, self._hi * factor
        if factor < 0:
            return hi, lo
        return lo, hi

    def _product(self, other: Interval) -> tuple[float, float]:
        if self.is_empty or other.is_empty:
            return math.inf, -math.inf
        result = Interval(self._lo * other._lo)
        result.extend_to(self._lo * other._hi)
        result.extend_to(self._hi * other._lo)
        result.extend_to(self._hi * other._hi)
        return result._lo, result._hi

    def __add__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            return Interval._from_bounds(self._lo + other._lo, self._hi + other._hi)
        if isinstance(other, Real):
            return Interval._from_bounds(self._lo + other, self._hi + other)
        return NotImplemented

    def __radd__(self, other: object) -> Interval:
        if isinstance(other, Real):
            return Interval._from_bounds(other + self._lo, other + self._hi)
        return NotImplemented

    def __iadd__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            self._lo += other._lo
            self._hi += other._hi
            return self
        if isinstance(other, Real):
            self._lo += other
            self._hi += other
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            return Interval._from_bounds(self._lo - other._hi, self._hi - other._lo)
        if isinstance(other, Real):
            return Interval._from_bounds(self._lo - other, self._hi - other)
        return NotImplemented

    def __rsub__(self, other: object) -> Interval:
        if isinstance(other, Real):
            return Interval._from_bounds(other - self._hi, other - self._lo)
        return NotImplemented

    def __isub__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            self._lo, self._hi = self._lo - other._hi, self._hi - other._lo
            return self
        if isinstance(other, Real):
            self._lo -= other
            self._hi -= other
            return self
        return NotImplemented

    def __mul__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            return Interval._from_bounds(*self._product(other))
        if isinstance(other, Real):
            return Interval._from_bounds(*self._scaled(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Interval:
        if isinstance(other, Real):
            return Interval._from_bounds(*self._scaled(other))
        return NotImplemented

    def __imul__(self, other: object) -> Interval:
        if isinstance(other, Interval):
            self._lo, self._hi = self._product(other)
            return self
        if isinstance(other, Real):
            self._lo, self._hi = self._scaled(other)
            return self
        return NotImplemented

    # Interval / Interval is deliberately absent: a divisor containing
    # zero has no single enclosing interval.
    def __truediv__(self, other: object) -> Interval:
        if isinstance(other, Real):
            return Interval._from_bounds(*self._scaled(other, divide=True))
        return NotImplemented

    def __itruediv__(self, other: object) -> Interval:
        if isinstance(other, Real):
            self._lo, self._hi = self._scaled(other, divide=True)
            return self
        return NotImplemented

    def __neg__(self) -> Interval:
        return Interval._from_bounds(-self._hi, -self._lo)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._lo == other._lo and self._hi == other._hi

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        if self._lo == math.inf and self._hi == -math.inf:
            return "Interval()"
        return f"Interval({self._lo}, {self._hi})"

    def __str__(self) -> str:
        if self.is_empty:
            return "[]"
        if self._lo == self._hi:
            return f"{self._lo}"
        return f"[{self._lo}, {self._hi}]"


def unify(a: Interval, b: Interval) -> Interval:
    """Return the smallest interval containing both *a* and *b*.

    Note: this is the *hull*, not the set-theoretic union (which may
    not be an interval when the inputs are disjoint). Two empty
    intervals unify to the empty interval.
    """
    return Interval._from_bounds(min(a.min, b.min), max(a.max, b.max))


def intersect(a: Interval, b: Interval, *, allow_touching: bool = False) -> Interval | None:
    """Return the overlap of two intervals, or ``None`` if they are disjoint.

    Args:
        a: First interval.
        b: Second interval.
        allow_touching: Also return the single-point overlap when the
            intervals only share an endpoint.
    """
    lo = max(a.min, b.min)
    hi = min(a.max, b.max)
    if lo < hi or (allow_touching and lo == hi):
        return Interval(lo, hi)
    return None


__all__ = [
    "EPSILON",
    "Interval",
    "are_near",
    "infinity",
    "intersect",
    "unify",
]
