from sparsecalc.cli import main

def test_cli_multiply(matrix_files, tmp_path, capsys):
    """Test a successful run writes the result file"""
    path_a, path_b = matrix_files
    status = main(['multiply', str(path_a), str(path_b), '--output-dir', str(tmp_path)])

    output_path = tmp_path / 'matrix_multiply_result.txt'
    assert status == 0
    assert output_path.read_text(encoding='utf-8') == "rows=2\ncols=2\n(0, 0, 10)\n(0, 1, 20)"
    assert f"Result written to {output_path}" in capsys.readouterr().out

def test_cli_missing_arguments(capsys):
    """Test usage is printed when arguments are missing"""
    assert main(['add', 'only_one.txt']) == 1
    assert 'usage' in capsys.readouterr().err

def test_cli_unknown_operation(matrix_files, tmp_path, capsys):
    """Test an invalid operation exits with status 1"""
    path_a, path_b = matrix_files
    status = main(['divide', str(path_a), str(path_b), '--output-dir', str(tmp_path)])

    assert status == 1
    assert 'Allowed operations are add, subtract, multiply' in capsys.readouterr().err
    assert list(tmp_path.glob('matrix_*_result.txt')) == []

def test_cli_malformed_file(tmp_path, capsys):
    """Test a malformed file exits with status 1"""
    bad = tmp_path / 'bad.txt'
    bad.write_text("ROWS=2\ncols=2", encoding='utf-8')

    assert main(['add', str(bad), str(bad), '--output-dir', str(tmp_path)]) == 1
    assert 'Invalid file format' in capsys.readouterr().err

def test_cli_missing_file(tmp_path, capsys):
    """Test an unreadable file exits with status 1"""
    missing = str(tmp_path / 'missing.txt')
    assert main(['add', missing, missing, '--output-dir', str(tmp_path)]) == 1
    assert 'Error' in capsys.readouterr().err

def test_cli_invalid_utf8_file(tmp_path, capsys):
    """Test a file with a non UTF-8 byte exits with status 1"""
    bad = tmp_path / 'bad.txt'
    bad.write_bytes(b"rows=1\ncols=1\n(0, 0, \xff)")

    assert main(['add', str(bad), str(bad), '--output-dir', str(tmp_path)]) == 1
    assert 'not valid UTF-8' in capsys.readouterr().err
    assert not (tmp_path / 'matrix_add_result.txt').exists()
