import re

import pytest

from rankwalk.cli_jacobi import main
from rankwalk.gauss_seidel import gauss_seidel
from rankwalk.jacobi import jacobi, jacobi_blocked
from rankwalk.nodes import NodeTable

EDGES = [(10, 20), (20, 30), (30, 10), (10, 30), (40, 10)]


@pytest.fixture
def edge_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(
        "# a comment line\n" + "".join(f"{a}\t{b}\n" for a, b in EDGES),
        encoding="utf-8",
    )
    return path


def _run(args, capsys):
    status = main(args)
    return status, capsys.readouterr().out


def _top_lines(out):
    return re.findall(r"^\d+\. Page (\S+) \(rank: ([0-9.]+)\)$", out, re.MULTILINE)


def test_serial_output_matches_solver(edge_file, tmp_path, capsys):
    timing = tmp_path / "times.txt"
    status, out = _run(
        ["--output", str(timing), str(edge_file), "4", "1e-8", "0.85"], capsys
    )
    assert status == 0
    assert "Serial version of Pagerank" in out
    assert "End of program!" in out

    expected = jacobi(NodeTable.from_edges(EDGES, 4), 1e-8, 0.85)
    iteration_lines = re.findall(r"^Max Error in iteration (\d+) = ", out, re.MULTILINE)
    assert [int(i) for i in iteration_lines] == list(range(1, expected.iterations + 1))
    assert f"Total iterations: {expected.iterations}" in out

    top = _top_lines(out)
    assert len(top) == 4
    ranks = [float(rank) for _, rank in top]
    assert ranks == sorted(ranks, reverse=True)
    assert top[0][1] == f"{max(expected.ranks):f}"
    assert {page for page, _ in top} == {"10", "20", "30", "40"}


def test_timing_file_is_appended(edge_file, tmp_path, capsys):
    timing = tmp_path / "times.txt"
    args = ["--output", str(timing), str(edge_file), "4", "1e-6", "0.85"]
    assert main(args) == 0
    assert main(args) == 0
    capsys.readouterr()
    lines = timing.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert all(float(line) >= 0 for line in lines)


def test_default_timing_file_name(edge_file, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--method", "gauss-seidel", str(edge_file), "4", "1e-6", "0.85", "2"]) == 0
    capsys.readouterr()
    assert (tmp_path / "gauss_seidel_blocking.txt").exists()


@pytest.mark.parametrize("method", ["blocking", "gauss-seidel"])
def test_parallel_methods_print_ranges(method, edge_file, tmp_path, capsys):
    timing = tmp_path / "times.txt"
    status, out = _run(
        ["--method", method, "--output", str(timing), str(edge_file), "4", "1e-8", "0.85", "3"],
        capsys,
    )
    assert status == 0
    assert "Parallel version of Pagerank" in out
    ranges = re.findall(r"^Thread (\d+), start = (\d+), end = (\d+)$", out, re.MULTILINE)
    assert [tuple(map(int, r)) for r in ranges] == [(0, 0, 1), (1, 1, 2), (2, 2, 4)]

    table = NodeTable.from_edges(EDGES, 4)
    solver = jacobi_blocked if method == "blocking" else gauss_seidel
    expected = solver(table, 1e-8, 0.85, 3)
    assert f"Total iterations: {expected.iterations}" in out
    assert _top_lines(out)[0][1] == f"{max(expected.ranks):f}"


@pytest.mark.parametrize("threads", ["0", "65"])
def test_thread_count_out_of_range(threads, edge_file, tmp_path, capsys):
    status, out = _run(
        ["--method", "blocking", "--output", str(tmp_path / "t.txt"),
         str(edge_file), "4", "1e-6", "0.85", threads],
        capsys,
    )
    assert status == 1
    assert "Threads number must be >= 1 and  <= 64!" in out
    assert not (tmp_path / "t.txt").exists()


def test_missing_graph_file(tmp_path, capsys):
    status = main(["--output", str(tmp_path / "t.txt"), str(tmp_path / "absent.txt"), "4", "1e-6", "0.85"])
    err = capsys.readouterr().err
    assert status == 1
    assert "Error opening the file" in err


def test_too_many_nodes_for_size(edge_file, tmp_path, capsys):
    status = main(["--output", str(tmp_path / "t.txt"), str(edge_file), "2", "1e-6", "0.85"])
    capsys.readouterr()
    assert status == 1


def test_non_positive_threshold(edge_file, tmp_path, capsys):
    status = main(["--output", str(tmp_path / "t.txt"), str(edge_file), "4", "0", "0.85"])
    capsys.readouterr()
    assert status == 1
    assert not (tmp_path / "t.txt").exists()


def test_missing_arguments_exit_with_usage(capsys):
    with pytest.raises(SystemExit) as info:
        main(["graph.txt", "4"])
    capsys.readouterr()
    assert info.value.code == 2