"""Concrete vector spaces."""

from .tensor_vector import TensorVector, TensorVectorCreator
from .vector2 import Vector2, Vector2Creator, vector2d

__all__ = [
    'TensorVector',
    'TensorVectorCreator',
    'Vector2',
    'Vector2Creator',
    'vector2d'
]
