"""
Plain 2-dimensional real vectors.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List

from ..base.interfaces import Vector, VectorCreator
from ..base.exceptions import TypeMismatchError


@dataclass(frozen=True)
class Vector2Creator(VectorCreator):
    """Creates ``Vector2``s. All instances describe the same space."""

    @property
    def dimension(self) -> int:
        return 2

    def new(self, component_fn: Callable[[int], float]) -> 'Vector2':
        return Vector2(float(component_fn(0)), float(component_fn(1)))

    def null(self) -> 'Vector2':
        return Vector2(0.0, 0.0)


@dataclass(frozen=True)
class Vector2(Vector):
    """A real vector with 2 components."""
    x: float
    y: float

    def _check_same_space(self, other: Vector) -> 'Vector2':
        if not isinstance(other, Vector2):
            raise TypeMismatchError(f"Expected a Vector2 but got {type(other).__name__}")
        return other

    def add(self, other: Vector) -> 'Vector2':
        other = self._check_same_space(other)
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: Vector) -> 'Vector2':
        other = self._check_same_space(other)
        return Vector2(self.x - other.x, self.y - other.y)

    def mul_scalar(self, scalar: float) -> 'Vector2':
        return Vector2(self.x * scalar, self.y * scalar)

    def transposed_mul(self, other: Vector) -> float:
        other = self._check_same_space(other)
        return self.x * other.x + self.y * other.y

    def creator(self) -> Vector2Creator:
        return Vector2Creator()

    def tolist(self) -> List[float]:
        return [self.x, self.y]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))


def vector2d(x: float, y: float) -> Vector2:
    """Create a 2-dimensional vector with the supplied components."""
    return Vector2(float(x), float(y))
