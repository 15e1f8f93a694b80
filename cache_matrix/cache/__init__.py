################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Matrix inverse cache
"""

from __future__ import annotations

from cache_matrix.cache.cached_matrix import CachedMatrix
from cache_matrix.cache.inverse_resolver import InverseResolver
from cache_matrix.cache.inverse_resolver import resolve_inverse


__all__ = ["CachedMatrix", "InverseResolver", "resolve_inverse"]
