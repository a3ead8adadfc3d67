import logging

import graphviz
from flask import Blueprint, request, jsonify, Response
from marshmallow import ValidationError

from ..schemas import MatrixOperationSchema, MatrixReportSchema
from ..services.matrix_service import MatrixService, OPERATIONS
from ..utils.helpers import allowed_file, generate_response, matrix_summary
from ..utils.matrix_codec import parse_matrix, serialize_matrix
from ..utils.report import build_matrix_graph, render_matrix_svg

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api/v1')
matrix_service = MatrixService()
operation_schema = MatrixOperationSchema()
report_schema = MatrixReportSchema()


def _read_uploaded_matrices():
    """Read matrix_a / matrix_b from a multipart upload, returns (texts, error_response)"""
    texts = {}
    for field in ('matrix_a', 'matrix_b'):
        file = request.files.get(field)
        if file is None or file.filename == '':
            return None, (jsonify(generate_response(False, error=f'No file provided for {field}')), 400)
        if not allowed_file(file.filename):
            return None, (jsonify(generate_response(False, error='Only .txt files are allowed')), 400)
        try:
            texts[field] = file.read().decode('utf-8')
        except UnicodeDecodeError:
            return None, (jsonify(generate_response(False, error=f'{field} is not valid UTF-8 text')), 400)
    return texts, None


@api_bp.route('/operations', methods=['GET'])
def list_operations():
    """List the supported matrix operations"""
    return jsonify(generate_response(data=list(OPERATIONS))), 200


@api_bp.route('/matrices/<operation>', methods=['POST'])
def compute(operation):
    """Apply an operation to two matrices sent as JSON text or as uploaded files"""
    matrix_service.validate_operation(operation)

    if request.files:
        texts, error_response = _read_uploaded_matrices()
        if error_response:
            return error_response
    else:
        data = request.get_json(silent=True)
        if not data:
            return jsonify(generate_response(False, error='No data provided')), 400
        try:
            texts = operation_schema.load(data)
        except ValidationError as e:
            return jsonify(generate_response(False, error=e.messages)), 400

    result = matrix_service.compute_from_text(operation, texts['matrix_a'], texts['matrix_b'])

    text = serialize_matrix(result, operation)
    return jsonify(generate_response(data=matrix_summary(result, text))), 200


@api_bp.route('/matrices/report', methods=['POST'])
def matrix_report():
    """Generate a Graphviz report (DOT source or SVG) for a matrix"""
    data = request.get_json(silent=True)
    if not data:
        return jsonify(generate_response(False, error='No data provided')), 400
    try:
        payload = report_schema.load(data)
        matrix = parse_matrix(payload['matrix'])
    except ValidationError as e:
        return jsonify(generate_response(False, error=e.messages)), 400

    if payload['format'] == 'dot':
        dot = build_matrix_graph(matrix, payload['title'])
        return Response(dot.source, mimetype='text/vnd.graphviz')

    try:
        svg = render_matrix_svg(matrix, payload['title'])
    except (graphviz.ExecutableNotFound, graphviz.CalledProcessError) as e:
        logger.error("Graphviz rendering failed: %s", e)
        return jsonify(generate_response(False, error='Graphviz rendering failed')), 500
    return Response(svg, mimetype='image/svg+xml')
