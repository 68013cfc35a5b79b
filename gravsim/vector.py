#!/usr/bin/env python3
"""
2D vector type used throughout the physics core.

Vector2 behaves as a value: every arithmetic operation returns a new vector.
The single exception is ``accumulate``, which adds in place so that a stream
of partial forces can be folded into one resultant without allocating a new
vector per term.

Division follows IEEE-754 semantics (a zero divisor yields +/-inf or nan)
instead of raising ZeroDivisionError, so a degenerate configuration corrupts
the state silently rather than aborting a frame. Callers that want to fail
fast check for this themselves (see UniverseModel strict mode).
"""
import math
from typing import Iterable, Iterator, Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def ieee_div(a: float, b: float) -> float:
    """Floating point division that returns inf/nan on a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _same(a: float, b: float) -> bool:
    # bitwise-style comparison: nan matches nan, signed zeros differ
    if math.isnan(a) or math.isnan(b):
        return math.isnan(a) and math.isnan(b)
    return a == b and math.copysign(1.0, a) == math.copysign(1.0, b)


class Vector2:
    """
    Vector in 2-dimensional space.

    Equality is exact component comparison, with no tolerance: nan equals
    nan and 0.0 differs from -0.0. Vectors are not hashable since
    accumulate mutates them.
    """

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def of(cls, pair: Iterable[float]) -> "Vector2":
        x, y = pair
        return cls(x, y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    def divide(self, k: float) -> "Vector2":
        return Vector2(ieee_div(self.x, k), ieee_div(self.y, k))

    def normalize(self) -> "Vector2":
        """Unit vector with the same direction (nan components at the zero vector)."""
        return self.divide(self.magnitude())

    def rotate(self, theta: float) -> "Vector2":
        """Rotate counter-clockwise by theta radians."""
        cos = math.cos(theta)
        sin = math.sin(theta)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def accumulate(self, other: "Vector2") -> "Vector2":
        """Add other to this vector in place and return self."""
        self.x += other.x
        self.y += other.y
        return self

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    __add__ = add
    __sub__ = subtract
    __mul__ = scale
    __rmul__ = scale
    __truediv__ = divide

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return _same(self.x, other.x) and _same(self.y, other.y)

    # mutable through accumulate
    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector2({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
