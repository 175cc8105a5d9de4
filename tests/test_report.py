import csv
import io

from conftest import SCENARIO, WALLED_END
from maze_search import load_maze, render_text
from maze_search.report import HEADERS, metrics_row, print_table, run_all, write_csv


def test_run_all_leaves_input_untouched():
    maze = load_maze(SCENARIO)
    results = run_all(maze, display_visited=True)
    assert [r.algorithm for r, _ in results] == ["DFS", "BFS", "GBFS", "A*"]
    assert all(r.found for r, _ in results)
    assert render_text(maze) == "A \n █\n B\n"
    assert all("*" in render_text(solved) for _, solved in results)


def test_metrics_row_for_failed_search():
    result, _ = run_all(load_maze(WALLED_END))[1]
    row = metrics_row(result)
    assert row["Algorithm"] == "BFS"
    assert row["Found Path"] is False
    assert row["Path Length (steps)"] == 0
    assert row["Nodes Expanded"] == 6


def test_print_table_aligns_columns():
    rows = [metrics_row(r) for r, _ in run_all(load_maze(SCENARIO))]
    out = io.StringIO()
    print_table(rows, out=out)
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("Algorithm")
    assert set(lines[1]) <= {"-", "+"}
    assert len(lines) == 2 + len(rows)
    assert len({len(line) for line in lines}) == 1


def test_write_csv(tmp_path):
    rows = [metrics_row(r) for r, _ in run_all(load_maze(SCENARIO))]
    out_csv = tmp_path / "metrics.csv"
    write_csv(rows, str(out_csv))
    with open(out_csv, encoding="utf-8", newline="") as f:
        read = list(csv.DictReader(f))
    assert list(read[0].keys()) == HEADERS
    assert [r["Path Length (steps)"] for r in read] == ["3", "3", "3", "3"]
