import pytest

from farsapy.matrix import Matrix, MatrixError, SparseFormat


@pytest.fixture
def matrix_file(tmp_path):
    path = tmp_path / "matrix.txt"
    path.write_text("2 3 3\n0 0 1.5\n1 2 -2.0\n0 1 4.0\n")
    return path


def test_from_file_reads_header_and_entries(matrix_file):
    matrix = Matrix.from_file(matrix_file, SparseFormat.COORDINATE_LIST)
    assert matrix.number_of_rows == 2
    assert matrix.number_of_columns == 3
    assert matrix.number_of_nonzeros == 3
    assert matrix.row_indices == [0, 1, 0]
    assert matrix.column_indices == [0, 2, 1]
    assert matrix.values == [1.5, -2.0, 4.0]


def test_product_with_unit_vector_gives_column(matrix_file):
    matrix = Matrix.from_file(matrix_file, SparseFormat.COORDINATE_LIST)
    assert matrix.matrix_vector_product([0.0, 0.0, 1.0]) == [0.0, -2.0]
    assert matrix.matrix_vector_product([0.0, 1.0, 0.0]) == [4.0, 0.0]


def test_transpose_product_with_unit_vector_gives_row(matrix_file):
    matrix = Matrix.from_file(matrix_file, SparseFormat.COORDINATE_LIST)
    assert matrix.matrix_transpose_vector_product([1.0, 0.0]) == [1.5, 4.0, 0.0]


def test_transpose_product_is_adjoint(matrix_file):
    matrix = Matrix.from_file(matrix_file, SparseFormat.COORDINATE_LIST)
    x = [0.3, -1.2, 2.5]
    y = [1.7, -0.4]
    ax = matrix.matrix_vector_product(x)
    aty = matrix.matrix_transpose_vector_product(y)
    left = sum(a * b for a, b in zip(y, ax))
    right = sum(a * b for a, b in zip(aty, x))
    assert left == pytest.approx(right)


def test_product_rejects_wrong_length(matrix_file):
    matrix = Matrix.from_file(matrix_file, SparseFormat.COORDINATE_LIST)
    with pytest.raises(MatrixError, match="incorrect length"):
        matrix.matrix_vector_product([1.0, 2.0])
    with pytest.raises(MatrixError, match="incorrect length"):
        matrix.matrix_transpose_vector_product([1.0, 2.0, 3.0])


@pytest.mark.parametrize(
    "sparse_format",
    [SparseFormat.COMPRESSED_SPARSE_ROW, SparseFormat.COMPRESSED_SPARSE_COLUMN],
)
def test_compressed_formats_refuse_products(matrix_file, sparse_format):
    matrix = Matrix.from_file(matrix_file, sparse_format)
    with pytest.raises(MatrixError):
        matrix.matrix_vector_product([1.0, 1.0, 1.0])


def test_missing_file(tmp_path):
    with pytest.raises(MatrixError, match="Failed to open input file."):
        Matrix.from_file(tmp_path / "absent.txt", SparseFormat.COORDINATE_LIST)


def test_missing_header(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("")
    with pytest.raises(MatrixError, match="Number of rows and columns not read."):
        Matrix.from_file(path, SparseFormat.COORDINATE_LIST)


@pytest.mark.parametrize(
    "content, message",
    [
        ("2 2 1\n5 0 1.0\n", "Invalid row index read."),
        ("2 2 1\n0 -1 1.0\n", "Invalid column index read."),
        ("2 2 3\n0 0 1.0\n", "Not all matrix elements have been read."),
    ],
)
def test_bad_contents(tmp_path, content, message):
    path = tmp_path / "m.txt"
    path.write_text(content)
    with pytest.raises(MatrixError, match=message):
        Matrix.from_file(path, SparseFormat.COORDINATE_LIST)


def test_format_lists_entries(matrix_file):
    matrix = Matrix.from_file(matrix_file, SparseFormat.COORDINATE_LIST)
    lines = matrix.format("A").splitlines()
    assert lines[0] == "Matrix:"
    assert len(lines) == 1 + 3 * matrix.number_of_nonzeros
    assert lines[1] == "A row_index(       0)=       0"
    assert lines[-1] == "A value(       2)=" + "%+23.16e" % 4.0


def test_constructor_validates_indices():
    with pytest.raises(MatrixError):
        Matrix(2, 2, [0], [3], [1.0])