# tests/test_samplers.py
"""
Initial-centroid samplers: uniform ball sampling and dataset sampling.
"""

from __future__ import annotations

import warnings

import pytest
import torch

from vclustering import (
    Dataset,
    DatasetSampler,
    TensorVectorCreator,
    UniformSampler,
    Vector2Creator,
    VectorCreator,
    uniform_sampler,
    vector2d,
)


@pytest.mark.parametrize("creator", [Vector2Creator(), TensorVectorCreator(3)])
def test_uniform_samples_lie_in_scaled_unit_ball(creator, generator):
    sampler = uniform_sampler(creator, generator)
    max_length = 4.0
    for k in range(100):
        sample = sampler(k, max_length)
        assert sample.creator() == creator
        # Scaling by max_length multiplies the squared length by max_length**2
        assert 0 < sample.length() <= max_length ** 2 + 1e-9
        assert all(c >= 0 for c in sample.tolist())


def test_uniform_sampler_rejects_null_and_outside_vectors():
    class ScriptedCreator(VectorCreator):
        """Returns a fixed sequence of vectors from new()."""

        def __init__(self, pairs):
            self._pairs = iter(pairs)

        @property
        def dimension(self):
            return 2

        def new(self, component_fn):
            x, y = next(self._pairs)
            return vector2d(x, y)

        def null(self):
            return vector2d(0, 0)

    creator = ScriptedCreator([(0.0, 0.0), (0.9, 0.9), (0.5, 0.5)])
    sample = UniformSampler(creator)(0, 2.0)
    assert sample == vector2d(1.0, 1.0)


def test_uniform_sampler_is_reproducible():
    creator = TensorVectorCreator(3)
    first = UniformSampler(creator, torch.Generator().manual_seed(3))
    second = UniformSampler(creator, torch.Generator().manual_seed(3))
    assert [first(k, 1.0) for k in range(5)] == [second(k, 1.0) for k in range(5)]


def test_uniform_sampler_zero_max_length_gives_null_vector(generator):
    sample = UniformSampler(Vector2Creator(), generator)(0, 0.0)
    assert sample.length() == 0


def test_uniform_sampler_warns_once_in_high_dimensions(generator):
    # Shrunk components always land in the unit ball.
    class SmallCreator(TensorVectorCreator):
        def new(self, component_fn):
            return super().new(lambda i: 0.1 * component_fn(i))

    sampler = UniformSampler(SmallCreator(11), generator)
    with pytest.warns(UserWarning, match="11 dimensions"):
        sampler(0, 1.0)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        sampler(1, 1.0)


def test_uniform_sampler_rejects_zero_dimensional_space():
    with pytest.raises(ValueError):
        UniformSampler(TensorVectorCreator(0))


def test_dataset_sampler_picks_distinct_dataset_vectors(generator):
    points = [vector2d(i, i) for i in range(6)]
    sampler = DatasetSampler(Dataset.from_vectors(points), generator)
    samples = [sampler(k, 123.0) for k in range(6)]
    assert sorted(samples, key=lambda v: v.x) == points


def test_dataset_sampler_too_many_clusters(generator):
    sampler = DatasetSampler(Dataset.from_vectors([vector2d(1, 1)]), generator)
    sampler(0, 1.0)
    with pytest.raises(ValueError):
        sampler(1, 1.0)
