################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Matrix validation and linear algebra helpers."""

from cache_matrix.math_utils.linalg import Linalg
from cache_matrix.math_utils.linalg import SingularMatrixError
from cache_matrix.math_utils.linalg import SolveOptions
from cache_matrix.math_utils.validation import InvalidArgumentError
from cache_matrix.math_utils.validation import require_matrix


__all__ = [
    "InvalidArgumentError",
    "Linalg",
    "SingularMatrixError",
    "SolveOptions",
    "require_matrix",
]
