################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Memoize the inverse of a matrix until the matrix is replaced."""

from __future__ import annotations

from cache_matrix.cache.cached_matrix import CachedMatrix
from cache_matrix.cache.inverse_resolver import InverseResolver
from cache_matrix.cache.inverse_resolver import Inverter
from cache_matrix.cache.inverse_resolver import resolve_inverse
from cache_matrix.config.cache_params import CacheParams
from cache_matrix.config.cache_params import CacheParamsError
from cache_matrix.math_utils.linalg import Linalg
from cache_matrix.math_utils.linalg import SingularMatrixError
from cache_matrix.math_utils.linalg import SolveOptions
from cache_matrix.math_utils.validation import InvalidArgumentError


__all__ = [
    "CacheParams",
    "CacheParamsError",
    "CachedMatrix",
    "InvalidArgumentError",
    "InverseResolver",
    "Inverter",
    "Linalg",
    "SingularMatrixError",
    "SolveOptions",
    "resolve_inverse",
]
