"""
Dataset container over vectors of one vector space.
"""

from typing import Iterator, Sequence, Tuple, Union

import numpy as np
import torch
from torch import Tensor

from .interfaces import Vector, VectorCreator
from .exceptions import EmptyDatasetError, TypeMismatchError


class Dataset:
    """An ordered, immutable collection of vectors sharing one vector space.

    The creator is kept alongside the data so that an empty dataset still
    knows which space it belongs to (``max()`` on it returns that space's
    null vector).
    """

    def __init__(self, data: Sequence[Vector], creator: VectorCreator):
        """
        Args:
            data: Vectors of the dataset, in order
            creator: Creator of the space all vectors belong to
        """
        self._data: Tuple[Vector, ...] = tuple(data)
        self._creator = creator

        for index, vector in enumerate(self._data):
            if vector.creator() != creator:
                raise TypeMismatchError(
                    f"Vector {index} belongs to {vector.creator()!r}, "
                    f"expected {creator!r}"
                )

    @classmethod
    def from_vectors(cls, data: Sequence[Vector]) -> 'Dataset':
        """Create a dataset whose space is inferred from its first vector.

        Raises:
            EmptyDatasetError: If ``data`` is empty
        """
        data = tuple(data)
        if len(data) == 0:
            raise EmptyDatasetError(
                "Expected a non-empty dataset, but got an empty dataset"
            )
        return cls(data, data[0].creator())

    @classmethod
    def from_array(cls, X: Union[Tensor, np.ndarray, list],
                   dtype: torch.dtype = torch.float64) -> 'Dataset':
        """Create a dataset of ``TensorVector`` rows from an (n, d) array.

        Args:
            X: (n, d) tensor, ndarray or nested list
            dtype: Floating point type of the vectors

        Returns:
            Dataset with one vector per row of ``X``
        """
        from ..utils.validation import validate_data
        from ..vectors.tensor_vector import TensorVector, TensorVectorCreator

        X = validate_data(X, dtype=dtype, ensure_min_samples=0)
        creator = TensorVectorCreator(X.shape[1], dtype)
        return cls([TensorVector(row) for row in X], creator)

    @property
    def creator(self) -> VectorCreator:
        """Creator of the vector space of this dataset."""
        return self._creator

    def max(self) -> Vector:
        """Return the longest vector.

        Ties keep the first vector in dataset order. An empty dataset yields
        the null vector of its space.
        """
        result = self._creator.null()
        length = result.length()
        for vector in self._data:
            vector_length = vector.length()
            if vector_length > length:
                result = vector
                length = vector_length
        return result

    def count(self) -> int:
        """Number of vectors in this dataset."""
        return len(self._data)

    def is_empty(self) -> bool:
        """True iff this dataset contains no vectors."""
        return self.count() == 0

    def as_slice(self) -> Tuple[Vector, ...]:
        """The vectors of this dataset, in order, as a read-only tuple."""
        return self._data

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Vector:
        return self._data[index]

    def __repr__(self) -> str:
        return f"Dataset(count={self.count()}, creator={self._creator!r})"
