from sparsecalc.utils.report import build_matrix_graph
from sparsecalc.utils.sparse_matrix import create_sparse_matrix_from_data

def test_build_matrix_graph():
    """Test DOT source contains one node per non-zero element"""
    matrix = create_sparse_matrix_from_data(2, 3, {(0, 2): 7, (1, 0): -1})
    source = build_matrix_graph(matrix, 'RESULT').source

    assert 'RESULT (2x3, 33.33%)' in source
    assert 'v_0_2' in source
    assert 'v_1_0' in source
    assert 'row_0 -> v_0_2' in source
    assert 'col_2 -> v_0_2' in source

def test_build_matrix_graph_empty():
    """Test an empty matrix only has the header node"""
    source = build_matrix_graph(create_sparse_matrix_from_data(2, 2, {})).source
    assert 'header' in source
    assert 'v_' not in source
