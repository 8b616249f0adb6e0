"""Sparse matrices stored as coordinate lists and read from text files."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class MatrixError(ValueError):
    """Raised when a matrix cannot be read or used as requested."""


class SparseFormat(Enum):
    """Storage layouts for sparse matrices."""

    COORDINATE_LIST = "coordinate list"
    COMPRESSED_SPARSE_ROW = "compressed sparse row"
    COMPRESSED_SPARSE_COLUMN = "compressed sparse column"


def _tokens(text: str) -> Iterator[str]:
    yield from text.split()


@dataclass
class Matrix:
    """A sparse matrix given by (row, column, value) triplets."""

    number_of_rows: int = 0
    number_of_columns: int = 0
    row_indices: list[int] = field(default_factory=list)
    column_indices: list[int] = field(default_factory=list)
    values: list[float] = field(default_factory=list)
    sparse_format: SparseFormat = SparseFormat.COORDINATE_LIST

    def __post_init__(self) -> None:
        if not len(self.row_indices) == len(self.column_indices) == len(self.values):
            raise MatrixError("Row indices, column indices and values differ in length.")
        for row in self.row_indices:
            if not 0 <= row < self.number_of_rows:
                raise MatrixError("Invalid row index read.")
        for column in self.column_indices:
            if not 0 <= column < self.number_of_columns:
                raise MatrixError("Invalid column index read.")

    @property
    def number_of_nonzeros(self) -> int:
        """Number of stored entries."""
        return len(self.values)

    def _entries(self) -> Iterator[tuple[int, int, float]]:
        if self.sparse_format is SparseFormat.COMPRESSED_SPARSE_ROW:
            raise MatrixError("Compressed sparse row products are unsupported.")
        if self.sparse_format is SparseFormat.COMPRESSED_SPARSE_COLUMN:
            raise MatrixError("Compressed sparse column products are unsupported.")
        if self.sparse_format is not SparseFormat.COORDINATE_LIST:
            raise MatrixError("Sparse format type error.")
        return zip(self.row_indices, self.column_indices, self.values)

    @classmethod
    def from_file(
        cls,
        file_name: str | Path,
        sparse_format: SparseFormat = SparseFormat.COORDINATE_LIST,
    ) -> Matrix:
        """Read a matrix from a file.

        The file starts with the numbers of rows, columns and nonzeros,
        followed by one ``row column value`` triplet per nonzero.
        """
        try:
            text = Path(file_name).read_text()
        except OSError:
            raise MatrixError("Failed to open input file.") from None

        tokens = _tokens(text)
        try:
            rows, columns, nonzeros = (int(next(tokens)) for _ in range(3))
        except (StopIteration, ValueError, RuntimeError):
            raise MatrixError("Number of rows and columns not read.") from None

        row_indices: list[int] = []
        column_indices: list[int] = []
        values: list[float] = []
        while len(values) < nonzeros:
            try:
                row = int(next(tokens))
                column = int(next(tokens))
                value = float(next(tokens))
            except (StopIteration, ValueError):
                break
            if not 0 <= row < rows:
                raise MatrixError("Invalid row index read.")
            if not 0 <= column < columns:
                raise MatrixError("Invalid column index read.")
            row_indices.append(row)
            column_indices.append(column)
            values.append(value)

        if len(values) < nonzeros:
            raise MatrixError("Not all matrix elements have been read.")

        return cls(rows, columns, row_indices, column_indices, values, sparse_format)

    def matrix_vector_product(self, vector: Sequence[float]) -> list[float]:
        """Return the product of this matrix with ``vector``."""
        if len(vector) != self.number_of_columns:
            raise MatrixError("Matrix assert failed.  Vector has incorrect length.")
        product = [0.0] * self.number_of_rows
        for row, column, value in self._entries():
            product[row] += value * vector[column]
        return product

    def matrix_transpose_vector_product(self, vector: Sequence[float]) -> list[float]:
        """Return the product of this matrix's transpose with ``vector``."""
        if len(vector) != self.number_of_rows:
            raise MatrixError("Matrix assert failed.  Vector has incorrect length.")
        product = [0.0] * self.number_of_columns
        for row, column, value in self._entries():
            product[column] += value * vector[row]
        return product

    def format(self, name: str) -> str:
        """Return a listing of row indices, column indices and values."""
        lines = ["Matrix:"]
        lines.extend(
            "%s row_index(%8d)=%8d" % (name, i, row) for i, row in enumerate(self.row_indices)
        )
        lines.extend(
            "%s column_index(%8d)=%8d" % (name, i, column)
            for i, column in enumerate(self.column_indices)
        )
        lines.extend(
            "%s value(%8d)=%+23.16e" % (name, i, value) for i, value in enumerate(self.values)
        )
        return "".join(line + "\n" for line in lines)