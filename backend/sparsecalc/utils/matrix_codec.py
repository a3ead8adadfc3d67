import logging

from ..errors import MatrixFormatError, NotANumberError
from .sparse_matrix import SparseMatrix

logger = logging.getLogger(__name__)

ROWS_PREFIX = 'rows='
COLS_PREFIX = 'cols='


def _parse_int(token, line_number):
    token = token.strip()
    try:
        return int(token)
    except ValueError:
        raise NotANumberError(token, line_number) from None


def _parse_header(line, prefix, line_number):
    line = line.strip()
    if not line.startswith(prefix):
        raise MatrixFormatError(f"expected line starting with '{prefix}'", line_number)
    value = _parse_int(line[len(prefix):], line_number)
    if value < 0:
        raise MatrixFormatError(f"'{prefix}' must be non-negative, got {value}", line_number)
    return value


def _parse_entry(line, line_number):
    """Parse a '(row, col, value)' line into a tuple of three ints"""
    start = line.find('(')
    end = line.find(')')
    if start == -1 or end == -1:
        raise MatrixFormatError(f"expected '(row, col, value)', got {line!r}", line_number)

    fields = line[start + 1:end].split(',')
    if len(fields) != 3:
        raise MatrixFormatError(
            f"expected 3 comma-separated values, got {len(fields)} in {line!r}", line_number
        )

    return tuple(_parse_int(field, line_number) for field in fields)


def parse_matrix(text):
    """
    Parse the textual matrix format into a SparseMatrix.

    Expected format:
        rows=<N>
        cols=<M>
        (<row>, <col>, <value>)
        ...

    Blank element lines are skipped.

    Raises:
        MatrixFormatError: If a header or element line is malformed
        NotANumberError: If a numeric field is not an integer
    """
    lines = text.strip().splitlines()
    if len(lines) < 2:
        raise MatrixFormatError("missing 'rows=' and 'cols=' header lines")

    rows = _parse_header(lines[0], ROWS_PREFIX, 1)
    cols = _parse_header(lines[1], COLS_PREFIX, 2)
    matrix = SparseMatrix(rows, cols)

    for line_number, line in enumerate(lines[2:], start=3):
        line = line.strip()
        if not line:
            continue
        row, col, value = _parse_entry(line, line_number)
        matrix.set_value(row, col, value)

    logger.debug("Parsed %dx%d matrix with %d non-zero elements", rows, cols, matrix.nnz)
    return matrix


def serialize_matrix(matrix, operation=None):
    """
    Serialize a SparseMatrix to the textual matrix format.

    Elements are written in the matrix's insertion order, without a trailing newline.
    """
    lines = [f"{ROWS_PREFIX}{matrix.rows}", f"{COLS_PREFIX}{matrix.cols}"]
    for entry in matrix.entries():
        lines.append(f"({entry.row}, {entry.col}, {entry.value})")

    if operation:
        logger.debug("Serialized %s result: %d non-zero elements", operation, matrix.nnz)
    return "\n".join(lines)


def read_matrix_file(path):
    """Read and parse a matrix file. OSError propagates to the caller."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise MatrixFormatError(f"{path} is not valid UTF-8 text (byte {e.start})") from e
    logger.debug("Read %s (%d bytes)", path, len(content))
    return parse_matrix(content)


def write_matrix_file(path, matrix, operation=None):
    """Serialize a matrix and write it to path. OSError propagates to the caller."""
    with open(path, 'w', encoding='utf-8') as f:
        f.write(serialize_matrix(matrix, operation))
    logger.debug("Wrote %s", path)
    return path
