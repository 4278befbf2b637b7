import numpy as np
import pytest

from polyfit.exceptions import ConfigurationError
from polyfit.samples import SampleKind, SampleSet, new_matrix, new_vector


def test_plain_sequences_are_stored_as_float_tuples():
    s = SampleSet.from_sequences([1, 0, 1], (2, 3.5, 4))
    assert s.kind is SampleKind.PLAIN
    assert s.x == (1.0, 0.0, 1.0)
    assert s.y == (2.0, 3.5, 4.0)
    assert len(s) == 3
    assert s.pairs() == [(1.0, 2.0), (0.0, 3.5), (1.0, 4.0)]


@pytest.mark.parametrize("dtype,kind", [
    (np.float32, SampleKind.FLOAT32),
    (np.float64, SampleKind.FLOAT64),
])
def test_numpy_arrays(dtype, kind):
    x = np.array([1, 0, 1], dtype=dtype)
    s = SampleSet.from_sequences(x, np.array([2, 3, 4], dtype=dtype))
    assert s.kind is kind
    assert s.x.dtype == dtype
    assert all(type(v) is float for pair in s.pairs() for v in pair)


def test_numpy_samples_are_frozen_copies():
    x = np.array([1.0, 2.0])
    s = SampleSet.from_sequences(x, np.array([3.0, 4.0]))
    x[0] = 99.0
    assert s.x[0] == 1.0
    with pytest.raises(ValueError):
        s.x[1] = 5.0


@pytest.mark.parametrize("x,y", [
    ([1, 2], np.array([1.0, 2.0])),
    (np.array([1.0, 2.0], dtype=np.float32), np.array([1.0, 2.0])),
    (np.array([1.0, 2.0]), [1.0, 2.0]),
])
def test_mixed_representations_are_rejected(x, y):
    with pytest.raises(ConfigurationError, match="one representation"):
        SampleSet.from_sequences(x, y)


def test_length_mismatch_is_rejected():
    with pytest.raises(ConfigurationError, match="same length"):
        SampleSet.from_sequences([1], [2, 3])


@pytest.mark.parametrize("x,y", [
    (None, None),
    ("abc", "def"),
    ({1, 2}, {3, 4}),
    (np.array([1, 2]), np.array([3, 4])),
    (np.zeros((2, 2)), np.zeros((2, 2))),
    ([1, "a"], [1, 2]),
    ([True, False], [1, 2]),
    ([], []),
])
def test_invalid_samples_are_rejected(x, y):
    with pytest.raises(ConfigurationError):
        SampleSet.from_sequences(x, y)


def test_new_vector_and_matrix():
    assert new_vector(SampleKind.PLAIN, 3) == [0.0, 0.0, 0.0]
    v = new_vector(SampleKind.FLOAT32, 2)
    assert v.dtype == np.float32 and v.shape == (2,)

    m = new_matrix(SampleKind.FLOAT64, 2, 3)
    assert len(m) == 2
    m[0][1] = 5.0
    assert m[1][1] == 0.0
    assert m[0].base is m[1].base
