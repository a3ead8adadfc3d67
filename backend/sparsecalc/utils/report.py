import graphviz


def build_matrix_graph(matrix, title='MATRIX'):
    """Build a Graphviz grid for a sparse matrix: row nodes, column nodes and one node per non-zero element."""
    dot = graphviz.Digraph(format='svg')
    dot.attr(rankdir='LR', nodesep='0.7', ranksep='0.7', splines='ortho')
    dot.attr('node', shape='box', style='filled', fontname='Arial')

    # Header node
    dot.node('header', f'{title} ({matrix.rows}x{matrix.cols}, {matrix.get_density():.2f}%)', fillcolor='#f9f9b6', width='2.2', height='0.7')

    row_ids = sorted({r for r, _ in matrix.data})
    col_ids = sorted({c for _, c in matrix.data})

    # Column nodes (green)
    for col in col_ids:
        dot.node(f'col_{col}', f'C{col}', fillcolor='#b6f9b6', width='1.2', height='0.7')
        dot.edge('header', f'col_{col}')

    # Row nodes (orange)
    for row in row_ids:
        dot.node(f'row_{row}', f'F{row}', fillcolor='#ff9966', width='1.5', height='0.7')
        dot.edge('header', f'row_{row}')

    if col_ids:
        dot.body.append('{rank=same; ' + ' '.join(['header'] + [f'col_{c}' for c in col_ids]) + ';}')

    # Element nodes (white)
    for entry in matrix.entries():
        node_id = f'v_{entry.row}_{entry.col}'
        dot.node(node_id, str(entry.value), fillcolor='white', width='1', height='0.7')
        dot.edge(f'row_{entry.row}', node_id)
        dot.edge(f'col_{entry.col}', node_id)

    return dot


def render_matrix_svg(matrix, title='MATRIX'):
    """Render the matrix grid as SVG bytes. Requires the Graphviz binaries."""
    return build_matrix_graph(matrix, title).pipe(format='svg')
