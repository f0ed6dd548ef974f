"""
Fixed-width numeric copies of a list.

Each conversion eagerly materializes an independent ``numpy.ndarray``. Integer
kinds wrap out-of-range values modulo ``2 ** bits`` (two's complement for the
signed kinds), ``uint8_clamped`` saturates to ``[0, 255]`` and the float kinds
keep the nearest representable value. Elements that are not numbers of the
accepted kind are rejected with ``InvalidArgumentError`` instead of being coerced.
"""

from collections.abc import Iterable
from numbers import Integral, Real
from typing import Any, Literal

import numpy as np
import numpy.typing as npt

from kollections.collections.exceptions import InvalidArgumentError

type TypedArrayKind = Literal[
    "int8",
    "uint8",
    "uint8_clamped",
    "int16",
    "uint16",
    "int32",
    "uint32",
    "int64",
    "uint64",
    "float32",
    "float64",
]

_INTEGER_KINDS: dict[str, tuple[int, type[np.integer[Any]], type[np.integer[Any]]]] = {
    "int8": (8, np.uint8, np.int8),
    "uint8": (8, np.uint8, np.uint8),
    "int16": (16, np.uint16, np.int16),
    "uint16": (16, np.uint16, np.uint16),
    "int32": (32, np.uint32, np.int32),
    "uint32": (32, np.uint32, np.uint32),
    "int64": (64, np.uint64, np.int64),
    "uint64": (64, np.uint64, np.uint64),
}

_FLOAT_KINDS: dict[str, type[np.floating[Any]]] = {
    "float32": np.float32,
    "float64": np.float64,
}


def _require_integers(values: list[object], kind: str) -> list[int]:
    integers: list[int] = []
    for index, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidArgumentError(
                f"Element at index {index} ({value!r}) cannot be stored in a {kind} array: "
                + "expected an integer."
            )
        integers.append(int(value))
    return integers


def _require_reals(values: list[object], kind: str) -> list[float]:
    reals: list[float] = []
    for index, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidArgumentError(
                f"Element at index {index} ({value!r}) cannot be stored in a {kind} array: "
                + "expected a real number."
            )
        reals.append(float(value))
    return reals


def to_typed_array(values: Iterable[object], kind: TypedArrayKind) -> npt.NDArray[Any]:
    """
    Copies ``values`` into a numpy array of the given fixed-width kind.

    Args:
        values: The elements to convert.
        kind: The element type of the resulting array.

    Returns:
        npt.NDArray[Any]: A new array that does not alias ``values``.

    Raises:
        InvalidArgumentError: If an element is not a number of the accepted kind,
            or ``kind`` is unknown.

    Example:
        ```python
        to_typed_array([1, 255, 256, -1], "int8")  # array([ 1, -1,  0, -1], dtype=int8)
        to_typed_array([-5, 1.5, 300], "uint8_clamped")  # array([  0,   2, 255], dtype=uint8)
        ```
    """
    elements = list(values)

    if kind in _INTEGER_KINDS:
        bits, unsigned, target = _INTEGER_KINDS[kind]
        mask = (1 << bits) - 1
        wrapped = [value & mask for value in _require_integers(elements, kind)]
        return np.array(wrapped, dtype=unsigned).view(target)

    if kind == "uint8_clamped":
        reals = np.array(_require_reals(elements, kind), dtype=np.float64)
        reals = np.nan_to_num(reals, nan=0.0, posinf=255.0, neginf=0.0)
        return np.clip(np.rint(reals), 0, 255).astype(np.uint8)

    if kind in _FLOAT_KINDS:
        return np.array(_require_reals(elements, kind), dtype=_FLOAT_KINDS[kind])

    raise InvalidArgumentError(f"Unknown typed array kind: {kind!r}")
