import pytest
from sparsecalc.errors import MatrixFormatError, NotANumberError
from sparsecalc.utils.matrix_codec import (
    parse_matrix,
    read_matrix_file,
    serialize_matrix,
    write_matrix_file,
)
from sparsecalc.utils.sparse_matrix import create_sparse_matrix_from_data

@pytest.fixture
def sample_text():
    """Sample matrix file contents"""
    return "rows=3\ncols=4\n(0, 1, 5)\n\n(2,3,-8)\n  ( 1 , 0 , 2 )  \n"

def test_parse(sample_text):
    """Test parsing headers and element lines"""
    matrix = parse_matrix(sample_text)

    assert matrix.shape == (3, 4)
    assert matrix.get_value(0, 1) == 5
    assert matrix.get_value(2, 3) == -8
    assert matrix.get_value(1, 0) == 2
    assert matrix.nnz == 3

def test_parse_headers_only():
    """Test a matrix with no elements"""
    matrix = parse_matrix("rows=2\ncols=2")
    assert matrix.shape == (2, 2)
    assert matrix.nnz == 0

def test_parse_crlf_and_padded_headers():
    """Test Windows line endings and whitespace around header lines"""
    matrix = parse_matrix("  rows=1\r\ncols= 2 \r\n(0, 1, 9)\r\n")
    assert matrix.shape == (1, 2)
    assert matrix.get_value(0, 1) == 9

def test_parse_zero_value_dropped():
    """Test explicit zero elements are not stored"""
    matrix = parse_matrix("rows=2\ncols=2\n(0, 0, 0)")
    assert matrix.nnz == 0

def test_parse_wrong_case_prefix():
    """Test ROWS= is rejected"""
    with pytest.raises(MatrixFormatError):
        parse_matrix("ROWS=2\ncols=2\n")

def test_parse_missing_cols():
    """Test a file without the cols line is rejected"""
    with pytest.raises(MatrixFormatError):
        parse_matrix("rows=2\n(0, 0, 1)")

def test_parse_empty():
    """Test empty input is rejected"""
    with pytest.raises(MatrixFormatError):
        parse_matrix("")

def test_parse_missing_field():
    """Test a data line with two fields is rejected"""
    with pytest.raises(MatrixFormatError):
        parse_matrix("rows=2\ncols=2\n(1,2)")

def test_parse_missing_parenthesis():
    """Test a data line without parentheses is rejected"""
    with pytest.raises(MatrixFormatError) as exc_info:
        parse_matrix("rows=2\ncols=2\n0, 1, 2")
    assert exc_info.value.line_number == 3

def test_parse_non_numeric_value():
    """Test a non-integer element field"""
    with pytest.raises(NotANumberError) as exc_info:
        parse_matrix("rows=2\ncols=2\n(0, 1, 2.5)")
    assert exc_info.value.token == '2.5'

def test_parse_non_numeric_header():
    """Test a non-integer dimension"""
    with pytest.raises(NotANumberError):
        parse_matrix("rows=abc\ncols=2")

def test_parse_negative_dimension():
    """Test negative dimensions are rejected"""
    with pytest.raises(MatrixFormatError):
        parse_matrix("rows=-1\ncols=2")

def test_serialize():
    """Test output format and insertion order"""
    matrix = create_sparse_matrix_from_data(2, 3, {(1, 2): 4, (0, 0): -1})
    assert serialize_matrix(matrix, 'add') == "rows=2\ncols=3\n(1, 2, 4)\n(0, 0, -1)"

def test_round_trip(sample_text):
    """Test parse(serialize(M)) == M"""
    matrix = parse_matrix(sample_text)
    assert parse_matrix(serialize_matrix(matrix)) == matrix

def test_file_helpers(tmp_path):
    """Test writing then reading a matrix file"""
    matrix = create_sparse_matrix_from_data(2, 2, {(0, 1): 3})
    path = tmp_path / 'matrix.txt'
    write_matrix_file(path, matrix, 'add')

    assert path.read_text(encoding='utf-8') == "rows=2\ncols=2\n(0, 1, 3)"
    assert read_matrix_file(path) == matrix

def test_read_missing_file(tmp_path):
    """Test a missing file raises OSError"""
    with pytest.raises(OSError):
        read_matrix_file(tmp_path / 'missing.txt')

def test_read_invalid_utf8_file(tmp_path):
    """Test undecodable bytes raise MatrixFormatError"""
    path = tmp_path / 'matrix.txt'
    path.write_bytes(b"rows=1\ncols=1\n(0, 0, \xff)")

    with pytest.raises(MatrixFormatError) as exc_info:
        read_matrix_file(path)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
