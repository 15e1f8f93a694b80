################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Validation helpers for matrix-valued inputs."""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


# numpy dtype kinds accepted as numeric: signed, unsigned, float, complex
NUMERIC_KINDS: str = "iufc"

# Placeholder fill value for a matrix constructed without content
PLACEHOLDER_FILL: float = float("nan")


class InvalidArgumentError(ValueError):
    """Raised when a value is not a 2-D numeric array."""


def is_matrix(value: Any) -> bool:
    """Return True if the value can be stored as a 2-D numeric array."""
    if isinstance(value, (str, bytes)):
        return False
    try:
        array: np.ndarray = np.asarray(value)
    except (TypeError, ValueError):
        # Ragged nested sequences
        return False
    return array.ndim == 2 and array.dtype.kind in NUMERIC_KINDS


def require_matrix(value: Any, name: str) -> NDArray[Any]:
    """Return a private read-only copy of a 2-D numeric array.

    Args:
        value: An ndarray or nested sequence of numbers
        name: Argument name used in the error message

    Raises:
        InvalidArgumentError: If the value is not a 2-D numeric array
    """
    if not is_matrix(value):
        raise InvalidArgumentError(f"{name} must be a 2-D numeric array")

    matrix: NDArray[Any] = np.array(value, copy=True)
    matrix.setflags(write=False)

    return matrix


def placeholder_matrix() -> NDArray[np.float64]:
    """Return the 1x1 matrix with undefined content used as a default."""
    return np.full((1, 1), PLACEHOLDER_FILL, dtype=np.float64)
