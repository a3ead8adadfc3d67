import pytest
from sparsecalc import create_app

@pytest.fixture
def app():
    """Create application for testing"""
    app = create_app('testing')
    app.config['TESTING'] = True

    return app

@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()

@pytest.fixture
def matrix_files(tmp_path):
    """Write the reference A and B matrices to disk"""
    path_a = tmp_path / 'a.txt'
    path_b = tmp_path / 'b.txt'
    path_a.write_text("rows=2\ncols=2\n(0, 0, 5)\n(1, 1, 3)\n", encoding='utf-8')
    path_b.write_text("rows=2\ncols=2\n(0, 0, 2)\n(0, 1, 4)\n", encoding='utf-8')
    return path_a, path_b
