################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for matrix input validation."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest

from cache_matrix.math_utils.validation import InvalidArgumentError
from cache_matrix.math_utils.validation import is_matrix
from cache_matrix.math_utils.validation import placeholder_matrix
from cache_matrix.math_utils.validation import require_matrix


@pytest.mark.parametrize(
    "value",
    [
        np.eye(3, dtype=np.float64),
        np.arange(6, dtype=np.int64).reshape((2, 3)),
        np.array([[1 + 2j, 0.0], [0.0, 1.0]], dtype=np.complex128),
        [[1.0, 2.0], [3.0, 4.0]],
        np.zeros((0, 0), dtype=np.float64),
    ],
)
def test_accepts_numeric_matrices(value: Any) -> None:
    """2-D numeric arrays and nested sequences are matrices."""
    assert is_matrix(value)


@pytest.mark.parametrize(
    "value",
    [
        "not a matrix",
        b"bytes",
        42,
        3.5,
        None,
        [1, 2, 3],
        np.zeros((2, 2, 2), dtype=np.float64),
        np.array([[True, False], [False, True]]),
        np.array([["a", "b"], ["c", "d"]]),
        [[1.0, 2.0], [3.0]],
        {"a": 1},
    ],
)
def test_rejects_non_matrices(value: Any) -> None:
    """Scalars, strings, ragged and wrong-rank inputs are rejected."""
    assert not is_matrix(value)
    with pytest.raises(InvalidArgumentError, match="value must be a 2-D numeric"):
        require_matrix(value, "value")


def test_require_matrix_returns_read_only_copy() -> None:
    """The returned matrix is detached from the caller and read-only."""
    source: np.ndarray = np.eye(2, dtype=np.float64)
    matrix: np.ndarray = require_matrix(source, "matrix")

    source[0, 0] = 5.0
    assert matrix[0, 0] == 1.0
    assert not matrix.flags.writeable
    with pytest.raises(ValueError):
        matrix[0, 0] = 2.0


def test_invalid_argument_is_value_error() -> None:
    """InvalidArgumentError can be caught as ValueError."""
    with pytest.raises(ValueError):
        require_matrix("x", "matrix")


def test_placeholder_matrix() -> None:
    """The placeholder is a 1x1 matrix with undefined content."""
    matrix: np.ndarray = placeholder_matrix()
    assert matrix.shape == (1, 1)
    assert np.isnan(matrix[0, 0])
    assert is_matrix(matrix)
