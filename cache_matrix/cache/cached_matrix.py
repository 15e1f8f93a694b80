################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix container with a single-slot memoized inverse."""

from __future__ import annotations

from typing import Any

from numpy.typing import NDArray

from cache_matrix.math_utils.validation import placeholder_matrix
from cache_matrix.math_utils.validation import require_matrix


# Marks a construction without an initial matrix
_NO_MATRIX: Any = object()


class CachedMatrix:
    """Pair a matrix with an optional memoized inverse.

    The stored matrix and inverse are read-only copies. Replacing the matrix
    always discards the cached inverse, so the cache never describes a matrix
    that is no longer stored.

    Instances are not thread-safe. Callers sharing an instance must serialize
    the whole check-compute-store sequence.
    """

    def __init__(self, initial: Any = _NO_MATRIX) -> None:
        """Initialize with a 2-D numeric array, or a 1x1 placeholder if omitted.

        Raises:
            InvalidArgumentError: If initial is not a 2-D numeric array
        """
        self._value: NDArray[Any]
        self._inverse: NDArray[Any] | None = None

        self.set_matrix(placeholder_matrix() if initial is _NO_MATRIX else initial)

    def __repr__(self) -> str:
        """Return a short description of the cache state."""
        state: str = "cached" if self._inverse is not None else "empty"
        return f"CachedMatrix(shape={self._value.shape}, inverse={state})"

    def get_matrix(self) -> NDArray[Any]:
        """Return the stored matrix."""
        return self._value

    def set_matrix(self, new_value: Any) -> None:
        """Replace the stored matrix and forget the cached inverse.

        Raises:
            InvalidArgumentError: If new_value is not a 2-D numeric array
        """
        matrix: NDArray[Any] = require_matrix(new_value, "matrix")

        self._value = matrix
        self._inverse = None

    def get_inverse(self) -> NDArray[Any] | None:
        """Return the cached inverse, or None if not computed."""
        return self._inverse

    def set_inverse(self, candidate: Any) -> None:
        """Store a computed inverse without checking it against the matrix.

        Raises:
            InvalidArgumentError: If candidate is not a 2-D numeric array
        """
        self._inverse = require_matrix(candidate, "inverse")

    def has_inverse(self) -> bool:
        """Return True if an inverse is cached."""
        return self._inverse is not None
