"""Tests for the command line entry point"""

import io
import json

import pytest
from rich.console import Console

from main import EXIT_CANCELLED, EXIT_INVALID_GRID, EXIT_OK, main, solve_grid


def quiet_console():
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def grid_file(tmp_path):
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({"grid": [[1, 1, 0, 1], [0, 0, 0, 1]]}))
    return str(path)


class TestSolveGrid:
    def test_sync(self):
        console = quiet_console()
        assert solve_grid([[1, 1, 0, 1]], console=console) == EXIT_OK
        assert "2 island(s)" in console.file.getvalue()

    def test_async_animated(self):
        console = quiet_console()
        code = solve_grid([[1, 0], [0, 1]], mode="async", animate=True, console=console)
        assert code == EXIT_OK
        assert "2 island(s)" in console.file.getvalue()

    def test_invalid_grid(self):
        assert solve_grid([[1, 2]], console=quiet_console()) == EXIT_INVALID_GRID
        assert solve_grid([[1, 0], []], mode="async", console=quiet_console()) == EXIT_INVALID_GRID

    def test_timeout_stops_traversal(self):
        grid = [[1] * 20 for _ in range(20)]
        code = solve_grid(grid, mode="async", delay=0.01, timeout=0.05, console=quiet_console())
        assert code == EXIT_CANCELLED


class TestMain:
    def test_grid_file(self, grid_file):
        assert main(["--grid", grid_file]) == EXIT_OK

    def test_random_grid_async(self):
        assert main(["--random", "5x6", "--seed", "3", "--mode", "async"]) == EXIT_OK

    def test_invalid_grid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([[1, 0], [1]]))
        assert main(["--grid", str(path)]) == EXIT_INVALID_GRID

    def test_missing_grid_key(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"cells": []}))
        assert main(["--grid", str(path)]) == EXIT_INVALID_GRID

    def test_cancelled(self):
        args = ["--random", "20x20", "--density", "1", "--mode", "async",
                "--delay", "0.01", "--timeout", "0.05"]
        assert main(args) == EXIT_CANCELLED

    def test_animate_requires_async(self):
        with pytest.raises(SystemExit):
            main(["--random", "3x3", "--animate"])

    def test_source_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_bad_proportions(self):
        with pytest.raises(SystemExit):
            main(["--random", "big"])

    def test_list(self, tmp_path, monkeypatch, capsys):
        (tmp_path / "island.json").write_text("[[1]]")
        monkeypatch.setattr("utils.loader.DATA", str(tmp_path))
        assert main(["--list"]) == EXIT_OK
        assert "island.json" in capsys.readouterr().out
