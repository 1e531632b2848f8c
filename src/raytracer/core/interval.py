# core/interval.py
import math


class Interval:
    """
    A closed range of real numbers [min, max].

    Used to bound valid ray parameters during intersection and to clamp
    color channels before quantization.
    """
    __slots__ = ("min", "max")

    def __init__(self, min_: float = math.inf, max_: float = -math.inf):
        # Default is the empty interval.
        self.min = min_
        self.max = max_

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)
