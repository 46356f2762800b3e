"""
Vectors of arbitrary dimension backed by a 1-D torch tensor.
"""

from typing import Callable, List, Optional, Sequence, Union

import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import Vector, VectorCreator
from ..base.exceptions import TypeMismatchError


class TensorVectorCreator(VectorCreator):
    """Creates ``TensorVector``s of a fixed dimension and dtype.

    Dimension and dtype together identify the vector space: a float32 and a
    float64 vector of the same dimension do not mix.
    """

    def __init__(self, dimension: int, dtype: torch.dtype = torch.float64):
        if dimension < 0:
            raise ValueError(f"dimension must be non-negative, got {dimension}")
        if not dtype.is_floating_point:
            raise ValueError(f"dtype must be a floating point type, got {dtype}")
        self._dimension = dimension
        self._dtype = dtype

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def dtype(self) -> torch.dtype:
        return self._dtype

    def new(self, component_fn: Callable[[int], float]) -> 'TensorVector':
        components = [component_fn(i) for i in range(self._dimension)]
        return TensorVector(torch.tensor(components, dtype=self._dtype))

    def null(self) -> 'TensorVector':
        return TensorVector(torch.zeros(self._dimension, dtype=self._dtype))

    def __eq__(self, other) -> bool:
        return (isinstance(other, TensorVectorCreator)
                and other._dimension == self._dimension
                and other._dtype == self._dtype)

    def __hash__(self) -> int:
        return hash((TensorVectorCreator, self._dimension, self._dtype))

    def __repr__(self) -> str:
        return f"TensorVectorCreator(dimension={self._dimension}, dtype={self._dtype})"


class TensorVector(Vector):
    """A real vector stored as a 1-D tensor.

    The tensor is copied on construction and never modified afterwards, so
    vectors can be shared freely.
    """

    def __init__(self, data: Union[Tensor, np.ndarray, Sequence[float]],
                 dtype: Optional[torch.dtype] = None):
        """
        Args:
            data: 1-D tensor, ndarray or sequence of components
            dtype: Floating point type; defaults to the tensor's floating
                dtype or float64
        """
        if isinstance(data, Tensor):
            tensor = data.detach().clone()
        else:
            tensor = torch.as_tensor(np.asarray(data)).clone()

        if dtype is None:
            dtype = tensor.dtype if tensor.is_floating_point() else torch.float64
        tensor = tensor.to(dtype=dtype)

        if tensor.dim() != 1:
            raise ValueError(f"Expected 1D tensor, got {tensor.dim()}D")

        self._tensor = tensor
        self._creator = TensorVectorCreator(tensor.shape[0], dtype)

    @property
    def tensor(self) -> Tensor:
        """Copy of the underlying tensor."""
        return self._tensor.clone()

    @property
    def dimension(self) -> int:
        return self._creator.dimension

    def tolist(self) -> List[float]:
        return self._tensor.tolist()

    def _check_same_space(self, other: Vector) -> 'TensorVector':
        if not isinstance(other, TensorVector) or other._creator != self._creator:
            raise TypeMismatchError(
                f"Expected a vector of {self._creator!r}, got {type(other).__name__}"
                + (f" of {other.creator()!r}" if isinstance(other, Vector) else "")
            )
        return other

    def add(self, other: Vector) -> 'TensorVector':
        other = self._check_same_space(other)
        return TensorVector(self._tensor + other._tensor)

    def subtract(self, other: Vector) -> 'TensorVector':
        other = self._check_same_space(other)
        return TensorVector(self._tensor - other._tensor)

    def mul_scalar(self, scalar: float) -> 'TensorVector':
        return TensorVector(self._tensor * scalar)

    def transposed_mul(self, other: Vector) -> float:
        other = self._check_same_space(other)
        return torch.dot(self._tensor, other._tensor).item()

    def creator(self) -> TensorVectorCreator:
        return self._creator

    def __len__(self) -> int:
        return self.dimension

    def __getitem__(self, index: Union[int, slice]) -> Union[float, 'TensorVector']:
        if isinstance(index, slice):
            return TensorVector(self._tensor[index])
        return self._tensor[index].item()

    def __eq__(self, other) -> bool:
        return (isinstance(other, TensorVector)
                and other._creator == self._creator
                and torch.equal(self._tensor, other._tensor))

    def __hash__(self) -> int:
        return hash((self._creator, tuple(self.tolist())))

    def __repr__(self) -> str:
        return f"TensorVector({self.tolist()})"
