# tests/test_vectors.py
"""
Vector contract laws for both shipped vector spaces.

Covers:
- additive inverse, scalar identity and zero
- squared length / distance semantics and symmetry
- normalization, including the null vector
- creators: new(), null(), space identity
- TypeMismatchError across spaces
"""

from __future__ import annotations

import math

import numpy as np
import pytest
import torch

from vclustering import (
    TensorVector,
    TensorVectorCreator,
    TypeMismatchError,
    Vector2,
    Vector2Creator,
    vector2d,
)


def _tensor_vectors(rng, n, d):
    return [TensorVector(row) for row in rng.normal(size=(n, d))]


def _vector2s(rng, n):
    return [vector2d(x, y) for x, y in rng.normal(size=(n, 2))]


def _allclose(a, b, atol=1e-9):
    return np.allclose(a.tolist(), b.tolist(), atol=atol)


@pytest.fixture(params=["vector2", "tensor3"])
def vectors(request, rng):
    if request.param == "vector2":
        return _vector2s(rng, 8)
    return _tensor_vectors(rng, 8, 3)


def test_add_then_subtract_is_identity(vectors):
    for a in vectors:
        for b in vectors:
            assert _allclose(a.add(b).subtract(b), a)


def test_mul_scalar_one_and_zero(vectors):
    for v in vectors:
        assert v.mul_scalar(1) == v
        assert v.mul_scalar(0) == v.creator().null()


def test_operators_delegate_to_methods(vectors):
    a, b = vectors[0], vectors[1]
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert a * 2.5 == a.mul_scalar(2.5)
    assert 2.5 * a == a.mul_scalar(2.5)
    assert -a == a.mul_scalar(-1.0)


def test_length_is_squared_norm():
    assert vector2d(3, 4).length() == pytest.approx(25.0)
    assert TensorVector([1.0, 2.0, 2.0]).length() == pytest.approx(9.0)


def test_distance_is_symmetric_squared_distance(vectors):
    for a in vectors:
        for b in vectors:
            assert a.distance_to(b) == pytest.approx(b.distance_to(a))
    assert vector2d(1, 1).distance_to(vector2d(4, 5)) == pytest.approx(25.0)


def test_transposed_mul():
    assert vector2d(1, 2).transposed_mul(vector2d(3, 4)) == pytest.approx(11.0)
    assert TensorVector([1, 0, -1]).transposed_mul(TensorVector([2, 5, 2])) == pytest.approx(0.0)


def test_normalize_gives_unit_length_same_direction(vectors):
    for v in vectors:
        unit = v.normalize()
        assert unit.length() == pytest.approx(1.0)
        # Same direction: v is a positive multiple of unit
        assert v.transposed_mul(unit) == pytest.approx(math.sqrt(v.length()))
    assert _allclose(vector2d(3, 4).normalize(), vector2d(0.6, 0.8))


@pytest.mark.parametrize("creator", [Vector2Creator(), TensorVectorCreator(5)])
def test_normalize_null_vector_is_random_unit_vector(creator, generator):
    unit = creator.null().normalize(generator)
    assert unit.length() == pytest.approx(1.0)
    assert unit != creator.null()
    assert unit.creator() == creator


def test_normalize_null_vector_reproducible_with_generator():
    g1 = torch.Generator().manual_seed(7)
    g2 = torch.Generator().manual_seed(7)
    null = TensorVectorCreator(4).null()
    assert null.normalize(g1) == null.normalize(g2)


def test_creator_new_uses_component_function():
    v = TensorVectorCreator(4).new(lambda i: i * 10.0)
    assert v.tolist() == [0.0, 10.0, 20.0, 30.0]
    assert Vector2Creator().new(lambda i: i + 1) == Vector2(1.0, 2.0)


def test_creator_null_and_dimension():
    assert TensorVectorCreator(3).null().tolist() == [0.0, 0.0, 0.0]
    assert TensorVectorCreator(3).dimension == 3
    assert Vector2Creator().null() == vector2d(0, 0)
    assert Vector2Creator().dimension == 2


def test_creator_identity():
    assert TensorVectorCreator(3) == TensorVector([1, 2, 3]).creator()
    assert TensorVectorCreator(3) != TensorVectorCreator(2)
    assert TensorVectorCreator(3, torch.float32) != TensorVectorCreator(3, torch.float64)
    assert Vector2Creator() == vector2d(1, 2).creator()
    assert hash(TensorVectorCreator(3)) == hash(TensorVectorCreator(3))


def test_vectors_are_immutable():
    source = torch.tensor([1.0, 2.0], dtype=torch.float64)
    v = TensorVector(source)
    source[0] = 100.0
    v.tensor[1] = 100.0
    assert v.tolist() == [1.0, 2.0]

    a = vector2d(1, 2)
    a.add(vector2d(3, 4))
    assert a == vector2d(1, 2)


def test_tensor_vector_conversions():
    v = TensorVector(np.array([1, 2, 3]))
    assert v.creator().dtype == torch.float64
    assert len(v) == 3
    assert v[1] == 2.0
    assert TensorVector([1.0, 2.0], dtype=torch.float32).creator().dtype == torch.float32
    with pytest.raises(ValueError):
        TensorVector([[1.0, 2.0], [3.0, 4.0]])


def test_vectors_are_hashable():
    assert len({TensorVector([1, 2]), TensorVector([1.0, 2.0]), TensorVector([2, 1])}) == 2
    assert len({vector2d(1, 2), vector2d(1, 2), vector2d(2, 1)}) == 2


@pytest.mark.parametrize("a, b", [
    (vector2d(1, 2), TensorVector([1.0, 2.0])),
    (TensorVector([1.0, 2.0]), vector2d(1, 2)),
    (TensorVector([1.0, 2.0]), TensorVector([1.0, 2.0, 3.0])),
    (TensorVector([1.0, 2.0], dtype=torch.float32), TensorVector([1.0, 2.0])),
])
def test_binary_operations_reject_other_spaces(a, b):
    for op in (a.add, a.subtract, a.transposed_mul, a.distance_to):
        with pytest.raises(TypeMismatchError):
            op(b)


def test_type_mismatch_is_a_type_error():
    with pytest.raises(TypeError):
        vector2d(0, 0).add(TensorVector([0.0, 0.0]))


@pytest.mark.parametrize("dtype", [torch.int64, torch.bool])
def test_creator_rejects_non_floating_dtype(dtype):
    with pytest.raises(ValueError):
        TensorVectorCreator(2, dtype)


@pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
def test_creator_builds_vectors_of_its_own_space(dtype):
    creator = TensorVectorCreator(2, dtype)
    assert creator.null().creator() == creator
    assert creator.new(lambda i: i).creator() == creator


def test_normalize_null_vector_of_zero_dimensional_space_fails():
    with pytest.raises(ValueError):
        TensorVectorCreator(0).null().normalize()


def test_tensor_vector_slicing():
    v = TensorVector([1.0, 2.0, 3.0, 4.0])
    head = v[0:2]
    assert isinstance(head, TensorVector)
    assert head.tolist() == [1.0, 2.0]
    assert v[::2] == TensorVector([1.0, 3.0])
    assert v[-1] == 4.0
