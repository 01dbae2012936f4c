from __future__ import annotations

import numpy as np
import pytest

from vec3py import Vector3


def test_from_array():
    buf = [0, 1, 2, 3, 4, 5]
    assert Vector3().from_array(buf).to_tuple() == (0, 1, 2)
    assert Vector3().from_array(buf, 3).to_tuple() == (3, 4, 5)


def test_from_array_short_buffer_raises():
    with pytest.raises(IndexError):
        Vector3().from_array([1, 2])
    with pytest.raises(IndexError):
        Vector3().from_array([1, 2, 3, 4], 2)


def test_to_array_new_list(v: Vector3):
    assert v.to_array() == [1, 2, 3]


def test_to_array_grows_list(v: Vector3):
    assert v.to_array([9], 2) == [9, 0, 1, 2, 3]
    buf = [7, 7, 7, 7, 7]
    assert v.to_array(buf, 1) is buf
    assert buf == [7, 1, 2, 3, 7]


def test_array_round_trip(v: Vector3):
    buf = v.to_array([0.0] * 4, 1)
    assert Vector3().from_array(buf, 1).equals(v)


def test_numpy_buffers(v: Vector3, w: Vector3):
    buf = np.zeros(6)
    v.to_array(buf)
    w.to_array(buf, 3)
    np.testing.assert_array_equal(buf, [1, 2, 3, -4, 5, 0.5])
    r = Vector3().from_array(buf, 3)
    assert r.equals(w)
    assert isinstance(r.x, float)
    with pytest.raises(IndexError):
        v.to_array(np.zeros(2))


def test_to_numpy(v: Vector3):
    arr = v.to_numpy()
    assert arr.dtype == np.float64
    np.testing.assert_array_equal(arr, [1, 2, 3])
    arr[0] = 10
    assert v.x == 1


def test_from_array_negative_offset_follows_python_indexing():
    assert Vector3().from_array([1, 2, 3], -1).to_tuple() == (3, 1, 2)
