################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Cache-aware resolution of matrix inverses."""

from __future__ import annotations

import logging
from typing import Any
from typing import Optional
from typing import Protocol
from typing import cast

from numpy.typing import NDArray

from cache_matrix.cache.cached_matrix import CachedMatrix
from cache_matrix.config.cache_params import CacheParams
from cache_matrix.math_utils.linalg import Linalg
from cache_matrix.math_utils.linalg import SolveOptions


class Inverter(Protocol):
    def __call__(
        self, matrix: NDArray[Any], options: Optional[SolveOptions]
    ) -> NDArray[Any]: ...


class InverseResolver:
    """Serve matrix inverses from a CachedMatrix, computing them on a miss.

    Policy:
        1. If the matrix holds a cached inverse, notify and return it. The
           solve options are not consulted, so a second call with different
           options returns the first result.
        2. Otherwise invert the stored matrix, cache the result and return
           the cached value.

    Errors raised by the inverter propagate unchanged and leave the cache
    empty, so the caller may retry after replacing the matrix.
    """

    def __init__(
        self,
        params: Optional[CacheParams] = None,
        inverter: Optional[Inverter] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize resources."""
        self._params: CacheParams = params if params is not None else CacheParams()
        self._params.validate()

        self._inverter: Inverter = inverter if inverter is not None else Linalg.invert
        self._logger: logging.Logger = (
            logger if logger is not None else logging.getLogger(__name__)
        )

    @property
    def params(self) -> CacheParams:
        """Return the resolver parameters."""
        return self._params

    def resolve(
        self, cm: CachedMatrix, options: Optional[SolveOptions] = None
    ) -> NDArray[Any]:
        """Return the inverse of the stored matrix, using the cache if set."""
        inverse: Optional[NDArray[Any]] = cm.get_inverse()
        if inverse is not None:
            if self._params.notify_cache_hits:
                self._logger.log(self._params.log_level(), self._params.hit_message)
            return inverse

        matrix: NDArray[Any] = cm.get_matrix()
        solve_options: SolveOptions = (
            options if options is not None else SolveOptions(tol=self._params.solve_tol)
        )

        self._logger.debug(f"Computing inverse of {matrix.shape} matrix")
        result: NDArray[Any] = self._inverter(matrix, solve_options)

        cm.set_inverse(result)

        return cast(NDArray[Any], cm.get_inverse())


def resolve_inverse(
    cm: CachedMatrix, options: Optional[SolveOptions] = None
) -> NDArray[Any]:
    """Resolve an inverse with default parameters and the numpy inverter."""
    return InverseResolver().resolve(cm, options)
