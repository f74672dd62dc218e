import pytest

from rankwalk.cli_parlay import main


@pytest.fixture
def cycle_file(tmp_path):
    path = tmp_path / "cycle.txt"
    path.write_text("# a directed cycle\n1\t2\n2\t3\n3\t1\n", encoding="utf-8")
    return path


def _top_lines(output):
    lines = output.splitlines()
    start = next(i for i, line in enumerate(lines) if line.startswith("Top "))
    return lines[start:]


def test_power_method_writes_timing_and_top_pages(tmp_path, cycle_file, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(cycle_file)]) == 0
    out = capsys.readouterr().out
    assert "Loading graph..." in out
    assert "Vertices: 3   Edges: 3" in out
    assert "Converged in " in out
    timing = (tmp_path / "parlay_jacobi.txt").read_text(encoding="utf-8").splitlines()
    assert len(timing) == 1
    assert float(timing[0]) >= 0.0
    top = _top_lines(out)
    assert top[0] == "Top 10 pages by rank:"
    assert len(top) == 4
    assert {line.split(" ")[2] for line in top[1:]} == {"1", "2", "3"}


def test_timing_is_appended_on_each_run(tmp_path, cycle_file, capsys):
    output = tmp_path / "times.txt"
    for _ in range(2):
        assert main(["--output", str(output), str(cycle_file)]) == 0
    capsys.readouterr()
    assert len(output.read_text(encoding="utf-8").splitlines()) == 2


def test_delta_push_reports_progress(tmp_path, cycle_file, capsys):
    output = tmp_path / "times.txt"
    code = main(["--method", "delta-push", "--output", str(output), str(cycle_file)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Running PageRank with delta-push approach..." in out
    assert "Iteration 10, max_delta = " in out
    assert "Converged in " in out


def test_max_iters_limits_power_iteration(tmp_path, cycle_file, capsys):
    output = tmp_path / "times.txt"
    args = ["--method", "delta-push", "--output", str(output), str(cycle_file), "0", "1e-12", "0.85", "5"]
    assert main(args) == 0
    assert "Converged in 5 iterations" in capsys.readouterr().out


def test_random_walk_is_reproducible_with_seed(tmp_path, cycle_file, capsys):
    output = tmp_path / "times.txt"
    args = [
        "--method", "random-walk", "--walkers", "300", "--walk-length", "5",
        "--threads", "2", "--seed", "7", "--output", str(output), str(cycle_file),
    ]
    assert main(args) == 0
    first = _top_lines(capsys.readouterr().out)
    assert main(args) == 0
    second = _top_lines(capsys.readouterr().out)
    assert first == second
    assert len(first) == 4


def test_random_walk_rejects_zero_threads(tmp_path, cycle_file, capsys):
    output = tmp_path / "times.txt"
    args = ["--method", "random-walk", "--threads", "0", "--output", str(output), str(cycle_file)]
    assert main(args) == 1
    assert not output.exists()


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Cannot open" in capsys.readouterr().err


def test_too_few_vertices_fails(tmp_path, cycle_file, capsys):
    output = tmp_path / "times.txt"
    assert main(["--output", str(output), str(cycle_file), "2"]) == 1
    assert "Error in graph" in capsys.readouterr().err


def test_missing_filename_is_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2