import logging
import os

from ..errors import UnknownOperationError
from ..utils.matrix_codec import parse_matrix, read_matrix_file, write_matrix_file

logger = logging.getLogger(__name__)

OPERATIONS = ('add', 'subtract', 'multiply')


def result_filename(operation):
    """Nombre del archivo de resultado para una operación"""
    return f"matrix_{operation}_result.txt"


class MatrixService:
    """Servicio para operaciones entre matrices dispersas"""

    def __init__(self, output_dir='.'):
        self.output_dir = output_dir

    def validate_operation(self, operation):
        """Verifica que la operación sea soportada"""
        if operation not in OPERATIONS:
            raise UnknownOperationError(operation, OPERATIONS)
        return operation

    def apply_operation(self, operation, matrix_a, matrix_b):
        """Aplica la operación indicada y retorna una nueva matriz"""
        self.validate_operation(operation)
        logger.debug("Applying %s to %r and %r", operation, matrix_a, matrix_b)
        return getattr(matrix_a, operation)(matrix_b)

    def compute_from_text(self, operation, text_a, text_b):
        """Parsea ambas matrices desde texto y aplica la operación"""
        self.validate_operation(operation)
        matrix_a = parse_matrix(text_a)
        matrix_b = parse_matrix(text_b)
        return self.apply_operation(operation, matrix_a, matrix_b)

    def run_files(self, operation, path_a, path_b, output_dir=None):
        """
        Lee dos archivos de matrices, aplica la operación y escribe el resultado.

        Returns:
            str: Ruta del archivo de resultado
        """
        self.validate_operation(operation)

        matrix_a = read_matrix_file(path_a)
        matrix_b = read_matrix_file(path_b)
        result = self.apply_operation(operation, matrix_a, matrix_b)

        output_path = os.path.join(output_dir or self.output_dir, result_filename(operation))
        write_matrix_file(output_path, result, operation)
        logger.info("%s of %s and %s written to %s", operation, path_a, path_b, output_path)
        return output_path
