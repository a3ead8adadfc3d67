from datetime import datetime, timezone

ALLOWED_EXTENSIONS = ('.txt',)


def allowed_file(filename):
    """Check that an uploaded matrix file has an allowed extension"""
    return bool(filename) and filename.lower().endswith(ALLOWED_EXTENSIONS)


def matrix_summary(matrix, text):
    """Build the data payload describing a result matrix"""
    return {
        'rows': matrix.rows,
        'cols': matrix.cols,
        'nnz': matrix.nnz,
        'density': round(matrix.get_density(), 4),
        'result': text
    }


def generate_response(success=True, data=None, message=None, error=None):
    """Generate standardized API response"""
    response = {
        'success': success,
        'timestamp': datetime.now(timezone.utc).isoformat()
    }

    if data is not None:
        response['data'] = data

    if message:
        response['message'] = message

    if error:
        response['error'] = error

    return response
