import logging
from collections import namedtuple

from ..errors import DimensionMismatchError

logger = logging.getLogger(__name__)

MatrixEntry = namedtuple('MatrixEntry', ['row', 'col', 'value'])


class SparseMatrix:
    """
    Implementación de Matriz Dispersa usando un diccionario para almacenar elementos no-cero.
    Cada instancia es dueña exclusiva de su diccionario (fila, col) -> valor.
    """

    def __init__(self, rows, cols):
        """
        Inicializa una matriz dispersa vacía con las dimensiones dadas.

        Args:
            rows (int): Número de filas
            cols (int): Número de columnas
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Las dimensiones no pueden ser negativas: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.data = {}  # (fila, col) -> valor, nunca contiene ceros

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def nnz(self):
        """Número de elementos no-cero almacenados"""
        return len(self.data)

    def set_value(self, row, col, value):
        """
        Establece un valor en la posición especificada.
        Asignar 0 equivale a eliminar la entrada.

        Args:
            row (int): Índice de fila (base 0)
            col (int): Índice de columna (base 0)
            value (int): Valor a establecer
        """
        if value != 0:
            self.data[(row, col)] = value
        else:
            self.data.pop((row, col), None)

    def get_value(self, row, col):
        """
        Obtiene el valor en la posición especificada.

        Args:
            row (int): Índice de fila (base 0)
            col (int): Índice de columna (base 0)

        Returns:
            int: Valor en la posición (fila, col), 0 si no se encuentra
        """
        return self.data.get((row, col), 0)

    def entries(self):
        """Itera los elementos no-cero como MatrixEntry en orden de inserción"""
        for (r, c), value in self.data.items():
            yield MatrixEntry(r, c, value)

    def _combine(self, other, operation, combine):
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatchError(operation, self.shape, other.shape)

        result = SparseMatrix(self.rows, self.cols)

        # Unión de claves: primero las de esta matriz, luego las que solo están en la otra
        for key, value in self.data.items():
            result.set_value(key[0], key[1], combine(value, other.data.get(key, 0)))
        for key, value in other.data.items():
            if key not in self.data:
                result.set_value(key[0], key[1], combine(0, value))

        logger.debug("%s %dx%d: %d + %d entries -> %d",
                     operation, self.rows, self.cols, self.nnz, other.nnz, result.nnz)
        return result

    def add(self, other):
        """
        Suma otra matriz dispersa a esta.

        Args:
            other (SparseMatrix): Matriz a sumar

        Returns:
            SparseMatrix: Nueva matriz con el resultado

        Raises:
            DimensionMismatchError: Si las dimensiones no coinciden
        """
        return self._combine(other, 'addition', lambda a, b: a + b)

    def subtract(self, other):
        """
        Resta otra matriz dispersa de esta.

        Args:
            other (SparseMatrix): Matriz a restar

        Returns:
            SparseMatrix: Nueva matriz con el resultado

        Raises:
            DimensionMismatchError: Si las dimensiones no coinciden
        """
        return self._combine(other, 'subtraction', lambda a, b: a - b)

    def multiply(self, other):
        """
        Multiplica esta matriz por otra matriz dispersa.

        Args:
            other (SparseMatrix): Matriz por la cual multiplicar

        Returns:
            SparseMatrix: Nueva matriz de dimensiones (self.rows, other.cols)

        Raises:
            DimensionMismatchError: Si self.cols != other.rows
        """
        if self.cols != other.rows:
            raise DimensionMismatchError('multiplication', self.shape, other.shape)

        # Índice de la otra matriz por fila, conservando su orden de inserción
        other_rows = {}
        for (r2, c2), value2 in other.data.items():
            other_rows.setdefault(r2, []).append((c2, value2))

        sums = {}
        for (r1, c1), value1 in self.data.items():
            # La columna de la primera matriz coincide con la fila de la segunda
            for c2, value2 in other_rows.get(c1, ()):
                key = (r1, c2)
                sums[key] = sums.get(key, 0) + value1 * value2

        result = SparseMatrix(self.rows, other.cols)
        for (r, c), value in sums.items():
            result.set_value(r, c, value)

        logger.debug("multiplication %dx%d * %dx%d -> %d entries",
                     self.rows, self.cols, other.rows, other.cols, result.nnz)
        return result

    def get_density(self):
        """
        Calcula la densidad de la matriz (porcentaje de elementos no-cero).

        Returns:
            float: Densidad como porcentaje
        """
        total_elements = self.rows * self.cols
        return (len(self.data) / total_elements) * 100 if total_elements > 0 else 0

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __matmul__(self, other):
        return self.multiply(other)

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    __hash__ = None

    def __repr__(self):
        return f"SparseMatrix({self.rows}x{self.cols}, {len(self.data)} non-zero elements)"


def create_sparse_matrix_from_data(rows, cols, data_dict):
    """
    Crea una matriz dispersa desde un diccionario de datos.

    Args:
        rows (int): Número de filas
        cols (int): Número de columnas
        data_dict (dict): Diccionario con claves (fila, col) o 'fila,col' y valores

    Returns:
        SparseMatrix: Nueva matriz dispersa
    """
    matrix = SparseMatrix(rows, cols)
    for key, value in data_dict.items():
        if isinstance(key, str):
            row, col = map(int, key.split(','))
        else:
            row, col = key
        matrix.set_value(row, col, value)
    return matrix

