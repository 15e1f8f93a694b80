################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration schema for the matrix inverse cache."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping

from cache_matrix.math_utils.linalg import SOLVE_TOL


# Emit a notification when a cached inverse is served
NOTIFY_CACHE_HITS: bool = True
# Notification text for a cache hit
HIT_MESSAGE: str = "getting cached data"
# Logger level name for the cache hit notification
HIT_LOG_LEVEL: str = "info"
# Tolerance for default solve options on a cache miss
SOLVE_TOL_DEFAULT: float = SOLVE_TOL

# Level names accepted for hit_log_level
_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
}


class CacheParamsError(Exception):
    """Raised when cache parameter validation fails."""


@dataclass(frozen=True)
class CacheParams:
    """Parameters for resolving cached matrix inverses."""

    # Emit a notification when a cached inverse is served
    notify_cache_hits: bool = NOTIFY_CACHE_HITS
    # Notification text for a cache hit
    hit_message: str = HIT_MESSAGE
    # Logger level name for the cache hit notification
    hit_log_level: str = HIT_LOG_LEVEL
    # Tolerance for default solve options on a cache miss
    solve_tol: float = SOLVE_TOL_DEFAULT

    @classmethod
    def defaults(cls) -> CacheParams:
        """Return the default cache parameters."""
        return cls()

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> CacheParams:
        """Construct validated parameters from a flat mapping.

        Missing keys take their defaults. Unknown keys are rejected.
        """
        known: set[str] = {field.name for field in fields(cls)}
        unknown: list[str] = sorted(str(key) for key in values if key not in known)
        if unknown:
            raise CacheParamsError(f"Unknown cache parameters: {', '.join(unknown)}")

        notify: Any = values.get("notify_cache_hits", NOTIFY_CACHE_HITS)
        if not isinstance(notify, bool):
            raise CacheParamsError("notify_cache_hits must be a bool")
        for name in ("hit_message", "hit_log_level"):
            if name in values and not isinstance(values[name], str):
                raise CacheParamsError(f"{name} must be a string")

        try:
            params: CacheParams = cls(
                notify_cache_hits=notify,
                hit_message=values.get("hit_message", HIT_MESSAGE),
                hit_log_level=values.get("hit_log_level", HIT_LOG_LEVEL),
                solve_tol=float(values.get("solve_tol", SOLVE_TOL_DEFAULT)),
            )
        except (TypeError, ValueError) as exc:
            raise CacheParamsError(str(exc)) from exc

        params.validate()

        return params

    def validate(self) -> None:
        """Validate parameter invariants."""
        if not isinstance(self.hit_message, str) or not self.hit_message:
            raise CacheParamsError("hit_message must be set")
        if self.hit_log_level not in _LOG_LEVELS:
            raise CacheParamsError(
                f"hit_log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        if not math.isfinite(self.solve_tol):
            raise CacheParamsError("solve_tol must be finite")
        if self.solve_tol < 0.0:
            raise CacheParamsError("solve_tol must be non-negative")

    def log_level(self) -> int:
        """Return the logging level for the cache hit notification."""
        return _LOG_LEVELS[self.hit_log_level]

    def replace(self, **overrides: Any) -> CacheParams:
        """Return a modified copy of the parameters."""
        return replace(self, **overrides)

    def as_dict(self) -> dict[str, Any]:
        """Return a flat dict representation for debugging."""
        return {field.name: getattr(self, field.name) for field in fields(self)}
