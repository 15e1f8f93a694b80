################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from cache_matrix.config.cache_params import CacheParams
from cache_matrix.config.cache_params import CacheParamsError


__all__ = ["CacheParams", "CacheParamsError"]
