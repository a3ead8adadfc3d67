"""
Command-line dispatcher.

Usage: python -m sparsecalc <operation> <first_matrix_file_path> <second_matrix_file_path>
"""
import argparse
import logging
import sys

from .config import Config
from .errors import DimensionMismatchError, MatrixFormatError, UnknownOperationError
from .logging_config import setup_logging
from .services.matrix_service import MatrixService, OPERATIONS

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='sparsecalc',
        description='Add, subtract or multiply two sparse matrix files.',
    )
    parser.add_argument('operation', help=f"One of: {', '.join(OPERATIONS)}.")
    parser.add_argument('first_matrix', help='Path to the first matrix file.')
    parser.add_argument('second_matrix', help='Path to the second matrix file.')
    parser.add_argument(
        '--output-dir',
        default=Config.MATRIX_OUTPUT_DIR,
        help='Directory for matrix_<operation>_result.txt (default: current directory).',
    )
    parser.add_argument('--log-level', default='WARNING', help='Logging level (default: WARNING).')
    return parser


def main(argv=None):
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 3:
        parser.print_usage(sys.stderr)
        return 1
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    service = MatrixService(args.output_dir)

    try:
        output_path = service.run_files(args.operation, args.first_matrix, args.second_matrix)
    except UnknownOperationError as e:
        print(f"\n{e}", file=sys.stderr)
        return 1
    except (MatrixFormatError, DimensionMismatchError, OSError) as e:
        logger.debug("%s failed", args.operation, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Result written to {output_path}")
    return 0
