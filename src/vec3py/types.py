from __future__ import annotations

from typing import Any, MutableSequence, Sequence, Tuple

Float3 = Tuple[float, float, float]
FlatArray = Sequence[Any]
"""
Flat buffer of repeating ``[x, y, z]`` triples. Can be a ``list``, ``tuple``,
``array.array`` or a one-dimensional ``numpy.ndarray``.
"""
MutableFlatArray = MutableSequence[Any]
