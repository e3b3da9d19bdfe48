"""
Matrix — Immutable rectangular matrix

Immutable Pydantic model holding a rows × columns grid of cells. A cell is a
float or None (unset). Rows and columns are fixed at construction and every
row has exactly `columns` cells.

Arithmetic (determinant, inverse, add, product, scalar_multiply, row/column
as Vector) requires every involved cell to be set.

ERRORS:
- ShapeMismatch: add/product of incompatible dimensions
- InvalidShape: determinant/inverse of a non-square (or empty) matrix
- InvalidArgument: arithmetic on unset cells, inverse of a singular matrix
"""

import math
from functools import reduce
from typing import Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from fermat.core.domain.vector import Vector
from fermat.core.math.exceptions import InvalidArgument, InvalidShape, ShapeMismatch
from fermat.core.math.numerical_safeguards import validate_non_negative_integer

Cell = Optional[float]


class Matrix(BaseModel):
    """Rectangular grid of numbers."""

    rows: int = Field(..., ge=0, description="Number of rows")
    columns: int = Field(..., ge=0, description="Number of columns")
    cells: tuple[tuple[Cell, ...], ...] = Field(..., description="Row-major cells")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_rectangular(self) -> "Matrix":
        """All rows must exist and have exactly `columns` cells."""
        if len(self.cells) != self.rows:
            raise ValueError(f"expected {self.rows} rows, got {len(self.cells)}")
        for i, row in enumerate(self.cells):
            if len(row) != self.columns:
                raise ValueError(
                    f"row {i} has {len(row)} cells, expected {self.columns}"
                )
        return self

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Matrix":
        """
        Build a matrix from a 2D sequence.

        Dimensions are inferred: rows = outer length, columns = longest inner
        length. Shorter rows are padded with unset (None) cells.

        Examples:
            >>> Matrix.from_rows([[1, 2], [3]]).cells
            ((1.0, 2.0), (3.0, None))
        """
        columns = max((len(r) for r in rows), default=0)
        cells = tuple(tuple(r) + (None,) * (columns - len(r)) for r in rows)
        return cls(rows=len(rows), columns=columns, cells=cells)

    @classmethod
    def filled(cls, rows: int, columns: int, fill: Cell = None) -> "Matrix":
        """rows × columns matrix with every cell set to `fill` (default unset)."""
        r = validate_non_negative_integer(rows, "rows")
        c = validate_non_negative_integer(columns, "columns")
        return cls(rows=r, columns=c, cells=tuple((fill,) * c for _ in range(r)))

    @classmethod
    def identity(cls, n: int = 2) -> "Matrix":
        size = validate_non_negative_integer(n, "n")
        return cls.from_rows(
            [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]
        )

    @classmethod
    def rotation(cls, angle: float) -> "Matrix":
        """2×2 counter-clockwise rotation by `angle` radians."""
        s, c = math.sin(angle), math.cos(angle)
        return cls.from_rows([[c, -s], [s, c]])

    @classmethod
    def shear(cls, lam: float) -> "Matrix":
        return cls.from_rows([[1.0, lam], [0.0, 1.0]])

    @classmethod
    def reflection(cls, angle: float) -> "Matrix":
        """2×2 reflection across the line through the origin at `angle` radians."""
        s, c = math.sin(2 * angle), math.cos(2 * angle)
        return cls.from_rows([[c, s], [s, -c]])

    # =========================================================================
    # ACCESS
    # =========================================================================

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def to_lists(self) -> list[list[Cell]]:
        return [list(row) for row in self.cells]

    def _filled_cells(self) -> tuple[tuple[float, ...], ...]:
        for row in self.cells:
            if any(x is None for x in row):
                raise InvalidArgument("Matrix has unset cells")
        return self.cells  # type: ignore[return-value]

    def row(self, i: int) -> Vector:
        """Row `i` as a Vector."""
        row = self.cells[i]
        if any(x is None for x in row):
            raise InvalidArgument(f"Row {i} has unset cells")
        return Vector(values=row)

    def column(self, j: int) -> Vector:
        """Column `j` as a Vector."""
        column = tuple(row[j] for row in self.cells)
        if any(x is None for x in column):
            raise InvalidArgument(f"Column {j} has unset cells")
        return Vector(values=column)

    # =========================================================================
    # STRUCTURE
    # =========================================================================

    def transpose(self) -> "Matrix":
        """New columns × rows matrix with M.T[j][i] == M[i][j]."""
        cells = tuple(
            tuple(self.cells[i][j] for i in range(self.rows)) for j in range(self.columns)
        )
        return Matrix(rows=self.columns, columns=self.rows, cells=cells)

    # =========================================================================
    # ALGEBRA
    # =========================================================================

    def scalar_multiply(self, v: float) -> "Matrix":
        cells = self._filled_cells()
        return Matrix(
            rows=self.rows,
            columns=self.columns,
            cells=tuple(tuple(x * v for x in row) for row in cells),
        )

    def add(self, other: "Matrix") -> "Matrix":
        """
        Element-wise sum.

        Raises:
            ShapeMismatch: If row or column counts differ
        """
        if self.rows != other.rows or self.columns != other.columns:
            raise ShapeMismatch(
                f"Matrix sizes don't match: {self.rows}x{self.columns} "
                f"and {other.rows}x{other.columns}"
            )
        a, b = self._filled_cells(), other._filled_cells()
        return Matrix(
            rows=self.rows,
            columns=self.columns,
            cells=tuple(
                tuple(x + y for x, y in zip(row_a, row_b)) for row_a, row_b in zip(a, b)
            ),
        )

    def subtract(self, other: "Matrix") -> "Matrix":
        """
        Element-wise difference.

        Raises:
            ShapeMismatch: If row or column counts differ
        """
        if self.rows != other.rows or self.columns != other.columns:
            raise ShapeMismatch(
                f"Matrix sizes don't match: {self.rows}x{self.columns} "
                f"and {other.rows}x{other.columns}"
            )
        return self.add(other.scalar_multiply(-1.0))

    def product(self, other: "Matrix") -> "Matrix":
        """
        Matrix product self · other.

        Raises:
            ShapeMismatch: If self.columns != other.rows
        """
        if self.columns != other.rows:
            raise ShapeMismatch(
                f"Matrix sizes don't match: {self.rows}x{self.columns} "
                f"and {other.rows}x{other.columns}"
            )
        a, b = self._filled_cells(), other._filled_cells()
        cells = tuple(
            tuple(
                sum(a[i][k] * b[k][j] for k in range(self.columns))
                for j in range(other.columns)
            )
            for i in range(self.rows)
        )
        return Matrix(rows=self.rows, columns=other.columns, cells=cells)

    @staticmethod
    def sum(*matrices: "Matrix") -> "Matrix":
        """Sum of one or more matrices, left to right."""
        return reduce(Matrix.add, matrices)

    @staticmethod
    def multiply(*matrices: "Matrix") -> "Matrix":
        """Product of one or more matrices, left to right."""
        return reduce(Matrix.product, matrices)

    def determinant(self) -> float:
        """
        Determinant of a square matrix.

        - 1×1, 2×2: closed form
        - 3×3: sum of wrap-around diagonal products (rule of Sarrus)
        - n ≥ 4: fraction-free (Bareiss) elimination

        Raises:
            InvalidShape: If the matrix is not square or is empty
        """
        if not self.is_square:
            raise InvalidShape(f"Not a square matrix: {self.rows}x{self.columns}")
        if self.rows == 0:
            raise InvalidShape("Determinant of an empty matrix")

        m = self._filled_cells()
        n = self.rows

        if n == 1:
            return m[0][0]
        if n == 2:
            return m[0][0] * m[1][1] - m[0][1] * m[1][0]
        if n == 3:
            det = 0.0
            for j in range(n):
                diag_right = m[0][j]
                diag_left = m[0][j]
                for i in range(1, n):
                    diag_right *= m[i][(j + i) % n]
                    diag_left *= m[i][(j - i) % n]
                det += diag_right - diag_left
            return det

        return _bareiss_determinant([list(row) for row in m])

    def inverse(self) -> "Matrix":
        """
        Inverse via Gauss-Jordan elimination with row swapping.

        Raises:
            InvalidShape: If the matrix is not square
            InvalidArgument: If the matrix is singular
        """
        if not self.is_square:
            raise InvalidShape(f"Not a square matrix: {self.rows}x{self.columns}")

        n = self.rows
        c = [list(row) for row in self._filled_cells()]
        inv = Matrix.identity(n).to_lists()

        for i in range(n):
            e = c[i][i]

            # Zero on the diagonal: swap with a lower row that has a non-zero entry
            if not e:
                for ii in range(i + 1, n):
                    if c[ii][i] != 0:
                        c[i], c[ii] = c[ii], c[i]
                        inv[i], inv[ii] = inv[ii], inv[i]
                        break
                e = c[i][i]
                if not e:
                    raise InvalidArgument("Matrix not invertible")

            for j in range(n):
                c[i][j] /= e
                inv[i][j] /= e

            for ii in range(n):
                if ii == i:
                    continue
                f = c[ii][i]
                for j in range(n):
                    c[ii][j] -= f * c[i][j]
                    inv[ii][j] -= f * inv[i][j]

        return Matrix.from_rows(inv)

    def __add__(self, other: "Matrix") -> "Matrix":
        return self.add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        return self.subtract(other)

    def __mul__(self, other: "Matrix | float") -> "Matrix":
        if isinstance(other, Matrix):
            return self.product(other)
        return self.scalar_multiply(other)

    def __rmul__(self, other: float) -> "Matrix":
        return self.scalar_multiply(other)


def _bareiss_determinant(m: list[list[float]]) -> float:
    """Fraction-free elimination; `m` is modified in place."""
    n = len(m)
    sign = 1.0
    previous_pivot = 1.0

    for k in range(n - 1):
        if m[k][k] == 0:
            swap = next((i for i in range(k + 1, n) if m[i][k] != 0), None)
            if swap is None:
                return 0.0
            m[k], m[swap] = m[swap], m[k]
            sign = -sign

        for i in range(k + 1, n):
            for j in range(k + 1, n):
                m[i][j] = (m[i][j] * m[k][k] - m[i][k] * m[k][j]) / previous_pivot
        previous_pivot = m[k][k]

    return sign * m[n - 1][n - 1]
