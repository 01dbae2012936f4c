from __future__ import annotations

import logging
import math
from typing import Iterator

import numpy as np
from numpy import ndarray

from vec3py.logging import LOGGER_ID
from vec3py.types import Float3, FlatArray, MutableFlatArray

module_logger = logging.getLogger(f"{LOGGER_ID}.vector")


def _divide(a: float, b: float) -> float:
    """
    IEEE-754 division: ``x / 0`` gives a signed infinity and ``0 / 0`` gives NaN
    instead of raising :class:`ZeroDivisionError`.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


def _round_half_up(c: float) -> float:
    r = float(np.floor(c))
    # c - r is exact, unlike c + 0.5
    return r + 1.0 if c - r >= 0.5 else r


class Vector3:
    """
    A mutable vector in :math:`R^3`. Most operations modify the vector in place
    and return it, so calls can be chained::

        v = Vector3(1, 2, 3).add_scalar(1).multiply_scalar(2)

    Operations which compute a scalar (:meth:`dot`, :meth:`length`, ...) never
    modify the vector.

    Args:
        x: The vector x-coordinate. Defaults to 0.
        y: The vector y-coordinate. Defaults to 0.
        z: The vector z-coordinate. Defaults to 0.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def clone(self) -> Vector3:
        """
        Returns:
            A new vector with the same components as this one.
        """
        return Vector3(self.x, self.y, self.z)

    def copy(self, v: Vector3) -> Vector3:
        """
        Copies the components of the given vector into this vector.

        Args:
            v: The vector to copy from.

        Returns:
            This vector.
        """
        self.x = v.x
        self.y = v.y
        self.z = v.z
        return self

    def add(self, v: Vector3) -> Vector3:
        self.x += v.x
        self.y += v.y
        self.z += v.z
        return self

    def add_scalar(self, s: float) -> Vector3:
        self.x += s
        self.y += s
        self.z += s
        return self

    def add_vectors(self, a: Vector3, b: Vector3) -> Vector3:
        """
        Sets this vector to the sum of two given vectors.

        Args:
            a: The first summand.
            b: The second summand.

        Returns:
            This vector, now equal to ``a + b``.
        """
        self.x = a.x + b.x
        self.y = a.y + b.y
        self.z = a.z + b.z
        return self

    def add_scaled_vector(self, v: Vector3, s: float) -> Vector3:
        """
        Adds a scaled copy of the given vector to this vector (``self += v * s``).

        Args:
            v: The vector to be scaled and added.
            s: The scale factor.

        Returns:
            This vector.
        """
        self.x += v.x * s
        self.y += v.y * s
        self.z += v.z * s
        return self

    def sub(self, v: Vector3) -> Vector3:
        self.x -= v.x
        self.y -= v.y
        self.z -= v.z
        return self

    def sub_scalar(self, s: float) -> Vector3:
        self.x -= s
        self.y -= s
        self.z -= s
        return self

    def sub_vectors(self, a: Vector3, b: Vector3) -> Vector3:
        """
        Sets this vector to the difference ``a - b``.

        Args:
            a: The minuend.
            b: The subtrahend.

        Returns:
            This vector.
        """
        self.x = a.x - b.x
        self.y = a.y - b.y
        self.z = a.z - b.z
        return self

    def multiply(self, v: Vector3) -> Vector3:
        """Componentwise multiplication."""
        self.x *= v.x
        self.y *= v.y
        self.z *= v.z
        return self

    def multiply_scalar(self, s: float) -> Vector3:
        """
        Scalar multiplication. A non-finite scale factor (``inf``, ``-inf`` or
        ``nan``) sets all three components to zero instead.

        Args:
            s: A given scalar value to be multiplied to this vector.

        Returns:
            This vector.
        """
        if math.isfinite(s):
            self.x *= s
            self.y *= s
            self.z *= s
        else:
            module_logger.debug(f"Non-finite scale factor {s}, zeroing {self!r}.")
            self.x = 0.0
            self.y = 0.0
            self.z = 0.0
        return self

    def multiply_vectors(self, a: Vector3, b: Vector3) -> Vector3:
        """Sets this vector to the componentwise product of ``a`` and ``b``."""
        self.x = a.x * b.x
        self.y = a.y * b.y
        self.z = a.z * b.z
        return self

    def divide_scalar(self, s: float) -> Vector3:
        """
        Scalar division, computed as ``multiply_scalar(1 / s)``. Dividing by zero
        yields an infinite factor, so the vector is set to zero.

        Args:
            s: A given scalar value by which to divide this vector.

        Returns:
            This vector.
        """
        return self.multiply_scalar(_divide(1.0, s))

    def min(self, v: Vector3) -> Vector3:
        """Componentwise minimum with the given vector."""
        self.x = float(np.minimum(self.x, v.x))
        self.y = float(np.minimum(self.y, v.y))
        self.z = float(np.minimum(self.z, v.z))
        return self

    def max(self, v: Vector3) -> Vector3:
        """Componentwise maximum with the given vector."""
        self.x = float(np.maximum(self.x, v.x))
        self.y = float(np.maximum(self.y, v.y))
        self.z = float(np.maximum(self.z, v.z))
        return self

    def clamp(self, min_v: Vector3, max_v: Vector3) -> Vector3:
        """
        Clamps every component into the range given by the corresponding
        components of two bounding vectors.

        Args:
            min_v: The lower bounds.
            max_v: The upper bounds.

        Returns:
            This vector.
        """
        self.x = float(np.maximum(min_v.x, np.minimum(max_v.x, self.x)))
        self.y = float(np.maximum(min_v.y, np.minimum(max_v.y, self.y)))
        self.z = float(np.maximum(min_v.z, np.minimum(max_v.z, self.z)))
        return self

    def clamp_scalar(self, min_val: float, max_val: float) -> Vector3:
        """
        Clamps every component into the range ``[min_val, max_val]``.

        Args:
            min_val: The lower bound.
            max_val: The upper bound.

        Returns:
            This vector.
        """
        self.x = float(np.maximum(min_val, np.minimum(max_val, self.x)))
        self.y = float(np.maximum(min_val, np.minimum(max_val, self.y)))
        self.z = float(np.maximum(min_val, np.minimum(max_val, self.z)))
        return self

    def clamp_length(self, min_len: float, max_len: float) -> Vector3:
        """
        Scales this vector so that its length lies within ``[min_len, max_len]``,
        keeping its direction.

        The scale factor is ``clamped_length / length``. For a zero-length vector
        this factor is not finite and is passed to :meth:`multiply_scalar`
        as it is.

        Args:
            min_len: The minimum length.
            max_len: The maximum length.

        Returns:
            This vector.
        """
        length = self.length()
        clamped = np.maximum(min_len, np.minimum(max_len, length))
        return self.multiply_scalar(_divide(clamped, length))

    def floor(self) -> Vector3:
        self.x = float(np.floor(self.x))
        self.y = float(np.floor(self.y))
        self.z = float(np.floor(self.z))
        return self

    def ceil(self) -> Vector3:
        self.x = float(np.ceil(self.x))
        self.y = float(np.ceil(self.y))
        self.z = float(np.ceil(self.z))
        return self

    def round(self) -> Vector3:
        """
        Rounds every component to the nearest integer. Halves are rounded
        towards positive infinity, so ``2.5`` becomes ``3`` and ``-2.5`` becomes ``-2``.

        Returns:
            This vector.
        """
        self.x = _round_half_up(self.x)
        self.y = _round_half_up(self.y)
        self.z = _round_half_up(self.z)
        return self

    def round_to_zero(self) -> Vector3:
        """
        Truncates every component towards zero: negative components are rounded
        up, the others down.

        Returns:
            This vector.
        """
        self.x = float(np.ceil(self.x)) if self.x < 0 else float(np.floor(self.x))
        self.y = float(np.ceil(self.y)) if self.y < 0 else float(np.floor(self.y))
        self.z = float(np.ceil(self.z)) if self.z < 0 else float(np.floor(self.z))
        return self

    def negate(self) -> Vector3:
        self.x = -self.x
        self.y = -self.y
        self.z = -self.z
        return self

    def dot(self, v: Vector3) -> float:
        """
        The dot product between this vector and a given vector.

        Args:
            v: The given vector.

        Returns:
            The dot product between the two vectors (a scalar value).
        """
        return self.x * v.x + self.y * v.y + self.z * v.z

    def length_sq(self) -> float:
        """
        Returns:
            The squared length of this vector.
        """
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """
        The length (magnitude) of this vector. [ ie :math:`length := |vector|` ]

        Returns:
            The length of this vector (a scalar value).
        """
        return math.sqrt(self.length_sq())

    def length_manhattan(self) -> float:
        """
        Returns:
            The :math:`L^1` norm of this vector, the sum of the absolute values of its components.
        """
        return abs(self.x) + abs(self.y) + abs(self.z)

    def normalize(self) -> Vector3:
        """
        Normalizes this vector so that it becomes unit length (:math:`length = 1`).
        A zero-length vector stays at zero.

        Returns:
            This vector.
        """
        return self.divide_scalar(self.length())

    def set_length(self, length: float) -> Vector3:
        """
        Scales this vector to the given length, keeping its direction.

        Args:
            length: The new length.

        Returns:
            This vector.
        """
        return self.multiply_scalar(_divide(length, self.length()))

    def lerp(self, v: Vector3, alpha: float) -> Vector3:
        """
        Linearly interpolates between this vector and a given vector. ``alpha``
        is not clamped, values outside of ``[0, 1]`` extrapolate.

        Args:
            v: The vector to interpolate towards.
            alpha: The interpolation factor.

        Returns:
            This vector.
        """
        self.x += (v.x - self.x) * alpha
        self.y += (v.y - self.y) * alpha
        self.z += (v.z - self.z) * alpha
        return self

    def lerp_vectors(self, v1: Vector3, v2: Vector3, alpha: float) -> Vector3:
        """
        Sets this vector to the linear interpolation ``v1 + (v2 - v1) * alpha``.

        Args:
            v1: The start vector.
            v2: The end vector.
            alpha: The interpolation factor.

        Returns:
            This vector.
        """
        return self.sub_vectors(v2, v1).multiply_scalar(alpha).add(v1)

    def cross(self, v: Vector3) -> Vector3:
        """
        Sets this vector to the cross product between itself and a given vector.

        Args:
            v: The given vector.

        Returns:
            This vector.
        """
        return self.cross_vectors(self, v)

    def cross_vectors(self, a: Vector3, b: Vector3) -> Vector3:
        """
        Sets this vector to the cross product ``a x b``. Either argument may be
        this vector itself.

        Args:
            a: The left operand.
            b: The right operand.

        Returns:
            This vector.
        """
        ax, ay, az = a.x, a.y, a.z
        bx, by, bz = b.x, b.y, b.z
        self.x = ay * bz - az * by
        self.y = az * bx - ax * bz
        self.z = ax * by - ay * bx
        return self

    def angle_to(self, v: Vector3) -> float:
        """
        The angle between this vector and a given vector. The cosine is clamped
        to ``[-1, 1]`` before calling :func:`math.acos`. If either vector has
        zero length, the result is ``nan``.

        Args:
            v: The given vector.

        Returns:
            The angle in radians, between 0 and :math:`\\pi`.
        """
        theta = _divide(self.dot(v), self.length() * v.length())
        return math.acos(float(np.clip(theta, -1.0, 1.0)))

    def distance_to(self, v: Vector3) -> float:
        """
        The :math:`L^2` (Euclidean) distance between this vector and a given vector.

        Args:
            v: The given vector.

        Returns:
            The distance between the two vectors (a scalar value).
        """
        return math.sqrt(self.distance_to_squared(v))

    def distance_to_squared(self, v: Vector3) -> float:
        dx = self.x - v.x
        dy = self.y - v.y
        dz = self.z - v.z
        return dx * dx + dy * dy + dz * dz

    def equals(self, v: Vector3) -> bool:
        """
        Exact componentwise comparison, no tolerance is applied.

        Args:
            v: The vector to compare with.

        Returns:
            True if all three components are equal.
        """
        return v.x == self.x and v.y == self.y and v.z == self.z

    def from_array(self, array: FlatArray, offset: int = 0) -> Vector3:
        """
        Reads three consecutive elements of a flat buffer into this vector.
        The bounds are not checked; a buffer shorter than ``offset + 3`` raises
        its own :class:`IndexError`. Only non-negative offsets are supported: a
        negative offset is not rejected and follows Python indexing, so it counts
        from the end of the buffer and may wrap around.

        Args:
            array: The source buffer, for example a list or a ``numpy`` array.
            offset: Non-negative index of the x component. Defaults to 0.

        Returns:
            This vector.
        """
        self.x = float(array[offset])
        self.y = float(array[offset + 1])
        self.z = float(array[offset + 2])
        return self

    def to_array(
        self, array: MutableFlatArray | ndarray | None = None, offset: int = 0
    ) -> MutableFlatArray | ndarray:
        """
        Writes the components into three consecutive slots of a flat buffer.
        A list which is too short is padded with zeros first; fixed-size
        buffers such as ``numpy`` arrays are written in place.

        Args:
            array: The target buffer. A new list is created if omitted.
            offset: Index of the x component. Defaults to 0.

        Returns:
            The target buffer.
        """
        if array is None:
            array = []
        if isinstance(array, list) and len(array) < offset + 3:
            array.extend([0.0] * (offset + 3 - len(array)))
        array[offset] = self.x
        array[offset + 1] = self.y
        array[offset + 2] = self.z
        return array

    def to_numpy(self) -> ndarray:
        """
        Returns:
            The components as a ``numpy`` array of shape ``(3,)``.
        """
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> Float3:
        return (self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.equals(other)

    def __add__(self, b: Vector3) -> Vector3:
        return self.clone().add(b)

    def __sub__(self, b: Vector3) -> Vector3:
        return self.clone().sub(b)

    def __mul__(self, s: float) -> Vector3:
        return self.clone().multiply_scalar(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector3:
        return self.clone().divide_scalar(s)

    def __neg__(self) -> Vector3:
        return self.clone().negate()

    def __getitem__(self, n: int) -> float:
        """
        Returns the n-th element of the vector, starting by zero.

        Args:
            n: The index of the element to return.

        Returns:
            The vector element at n-th index.
        """
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"Vector3 does not have an element at index {n}.")

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
