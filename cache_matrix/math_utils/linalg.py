################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################
"""Linear solves and matrix inversion."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from .validation import InvalidArgumentError
from .validation import require_matrix


# Default tolerance for detecting linear dependence, float64 machine epsilon
SOLVE_TOL: float = float(np.finfo(np.float64).eps)


class SingularMatrixError(np.linalg.LinAlgError):
    """Raised when a matrix cannot be inverted."""


@dataclass(frozen=True)
class SolveOptions:
    """Optional arguments for a linear solve.

    Options are ignored when a cached inverse is served.

    Attributes:
        rhs: Right-hand side b of a x = b, either shape (n,) or (n, m). A
            vector is solved as an (n, 1) column. None solves against the
            identity, giving the inverse of a
        tol: Reject the solve when the reciprocal 1-norm condition number of
            a falls below this value. Values <= 0 disable the check
    """

    rhs: NDArray[Any] | None = None
    tol: float = SOLVE_TOL

    def __post_init__(self) -> None:
        """Validate the tolerance."""
        if isinstance(self.tol, bool) or not isinstance(self.tol, numbers.Real):
            raise InvalidArgumentError("tol must be a real number")
        if not np.isfinite(self.tol):
            raise InvalidArgumentError("tol must be finite")


class Linalg:
    """Linear algebra routines used to fill the inverse cache."""

    @staticmethod
    def rcond(a: Any) -> float:
        """Return the reciprocal 1-norm condition number of a square matrix."""
        mat: NDArray[Any] = Linalg.as_lapack_dtype(require_matrix(a, "a"))
        Linalg.ensure_square(mat, "a")
        cond: float = float(np.linalg.cond(mat, p=1))
        if not np.isfinite(cond) or cond == 0.0:
            return 0.0
        return 1.0 / cond

    @staticmethod
    def solve(a: Any, options: SolveOptions | None = None) -> NDArray[Any]:
        """Solve a x = b, or invert a when no right-hand side is given.

        Raises:
            InvalidArgumentError: If a or the right-hand side is malformed
            SingularMatrixError: If a is empty, not square, not finite, or
                too ill-conditioned for the tolerance
        """
        opts: SolveOptions = options if options is not None else SolveOptions()
        mat: NDArray[Any] = Linalg.as_lapack_dtype(require_matrix(a, "a"))
        Linalg.ensure_square(mat, "a")
        if not np.all(np.isfinite(mat)):
            raise SingularMatrixError("a must be finite")

        size: int = int(mat.shape[0])
        rhs: NDArray[Any] = Linalg._rhs_or_identity(opts.rhs, size)

        try:
            result: NDArray[Any] = np.linalg.solve(mat, rhs)
        except np.linalg.LinAlgError as exc:
            if opts.tol > 0.0:
                raise SingularMatrixError(_singular_message(0.0)) from exc
            raise SingularMatrixError(str(exc)) from exc

        if opts.tol > 0.0:
            # Without rhs the solution is the inverse of a
            rcond: float = (
                _rcond_from_inverse(mat, result)
                if opts.rhs is None
                else Linalg.rcond(mat)
            )
            if rcond < opts.tol:
                raise SingularMatrixError(_singular_message(rcond))

        return result

    @staticmethod
    def invert(a: Any, options: SolveOptions | None = None) -> NDArray[Any]:
        """Return the inverse of a, or the solution for options.rhs if set."""
        return Linalg.solve(a, options)

    @staticmethod
    def as_lapack_dtype(x: NDArray[Any]) -> NDArray[Any]:
        """Return x as float64 or complex128, the dtypes numpy.linalg supports."""
        dtype: type = np.complex128 if x.dtype.kind == "c" else np.float64
        return np.asarray(x, dtype=dtype)

    @staticmethod
    def ensure_square(x: NDArray[Any], name: str) -> None:
        """Ensure a 2-D array is a non-empty square matrix."""
        rows: int = int(x.shape[0])
        cols: int = int(x.shape[1])
        if rows == 0 or cols == 0:
            raise SingularMatrixError(f"{name} must not be empty")
        if rows != cols:
            raise SingularMatrixError(f"{name} ({rows} x {cols}) must be square")

    @staticmethod
    def _rhs_or_identity(rhs: NDArray[Any] | None, size: int) -> NDArray[Any]:
        if rhs is None:
            return np.eye(size, dtype=np.float64)

        b: NDArray[Any] = np.asarray(rhs)
        if b.dtype.kind not in "iufc" or b.ndim not in (1, 2):
            raise InvalidArgumentError("rhs must be a 1-D or 2-D numeric array")
        if b.shape[0] != size:
            raise InvalidArgumentError(f"rhs must have {size} rows")
        b = Linalg.as_lapack_dtype(b)
        if b.ndim == 1:
            # Vectors are solved as (n, 1) columns
            return b.reshape((size, 1))
        return b


def _rcond_from_inverse(a: NDArray[Any], a_inv: NDArray[Any]) -> float:
    cond: float = float(np.linalg.norm(a, 1) * np.linalg.norm(a_inv, 1))
    if not np.isfinite(cond) or cond == 0.0:
        return 0.0
    return 1.0 / cond


def _singular_message(rcond: float) -> str:
    return (
        "system is computationally singular: "
        f"reciprocal condition number = {rcond:g}"
    )
