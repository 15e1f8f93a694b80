################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""End-to-end test for caching the inverse of a random matrix."""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional

import numpy as np
import pytest
from numpy.typing import NDArray

import cache_matrix
from cache_matrix import CachedMatrix
from cache_matrix import InverseResolver
from cache_matrix import Linalg
from cache_matrix import SolveOptions


def test_random_matrix_inverted_once(caplog: pytest.LogCaptureFixture) -> None:
    """Two resolves on a 10x10 matrix share one inversion."""
    rng: np.random.Generator = np.random.default_rng(10)
    M: NDArray[np.float64] = rng.normal(size=(10, 10))
    while abs(np.linalg.det(M)) < 1e-6:
        M = rng.normal(size=(10, 10))

    invocations: list[int] = []

    def counting_inverter(
        matrix: NDArray[Any], options: Optional[SolveOptions]
    ) -> NDArray[Any]:
        invocations.append(1)
        return Linalg.invert(matrix, options)

    cm: CachedMatrix = CachedMatrix(M)
    resolver: InverseResolver = InverseResolver(inverter=counting_inverter)

    with caplog.at_level(logging.INFO, logger="cache_matrix"):
        solution: NDArray[Any] = resolver.resolve(cm)
        again: NDArray[Any] = resolver.resolve(cm)

    assert again is solution
    assert np.array_equal(again, solution)
    assert len(invocations) == 1
    assert np.allclose(M @ solution, np.eye(10), atol=1e-8)
    assert caplog.messages == ["getting cached data"]


def test_public_api_exports() -> None:
    """The top-level package exposes the public names."""
    for name in cache_matrix.__all__:
        assert hasattr(cache_matrix, name)
