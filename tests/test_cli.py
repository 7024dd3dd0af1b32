"""Tests for the tsp-solve, tsp-random and tsp-checksol entry points."""
import json
from pathlib import Path

import pytest

from tspbnb import checksol, generate
from tspbnb.main import main
from tspbnb.problem import DistanceMatrix, load_distance_matrix, random_distance_matrix

DATA = Path(__file__).resolve().parent.parent / "data"
TEST1 = str(DATA / "test1.txt")  # optimum 80
TEST2 = str(DATA / "test2.txt")  # optimum 5


class TestSolveCommand:
    def test_load_and_solve_with_pruning(self, capsys):
        assert main(["-l", TEST1, "-o"]) == 0
        out = capsys.readouterr().out
        assert "TSP problem of size 4 starting from city A." in out
        assert "Starting path exploration..." in out
        assert "TSP solved after 4 paths fully explored over 6." in out
        assert out.splitlines()[-1] == "[ A B D C A ] => (80)"

    def test_first_city(self, capsys):
        assert main(["-l", TEST2, "-f", "2"]) == 0
        out = capsys.readouterr().out
        assert "starting from city C." in out
        assert "TSP solved after 24 paths fully explored over 24." in out
        assert out.splitlines()[-1] == "[ C B A E D C ] => (5)"

    def test_random_problem(self, capsys):
        assert main(["-n", "5", "-s", "3"]) == 0
        out = capsys.readouterr().out
        assert "TSP problem of size 5 starting from city A (seed 3)." in out
        assert "TSP solved after 24 paths fully explored over 24." in out

    def test_verbose_lists_explored_paths(self, capsys):
        assert main(["-l", TEST1, "-v"]) == 0
        out = capsys.readouterr().out
        assert "[ A B C D A ] => (95)" in out
        assert "[ A D C B A ] => (95)" in out

    def test_debug_implies_verbose(self, capsys):
        assert main(["-l", TEST1, "-d"]) == 0
        out = capsys.readouterr().out
        assert "[ A - - - - ] => (0)" in out
        assert "[ A B C D A ] => (95)" in out

    def test_outdir_saves_results(self, tmp_path, capsys):
        outdir = tmp_path / "out"
        assert main(["-l", TEST1, "-o", "--outdir", str(outdir)]) == 0
        row = json.loads((outdir / "test1.json").read_text())
        assert row["instance"] == "test1"
        assert row["distance"] == 80
        assert row["tour"] == "ABDCA"
        assert (outdir / "test1.csv").exists()
        assert f"✓ Results saved to {outdir / 'test1.json'}" in capsys.readouterr().out

    def test_outdir_names_random_instance(self, tmp_path, capsys):
        assert main(["-n", "4", "-s", "2", "--outdir", str(tmp_path)]) == 0
        assert (tmp_path / "random_n4_s2.json").exists()
        assert (tmp_path / "random_n4_s2.csv").exists()

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["-n", "1"],
            ["-n", "27"],
            ["-l", TEST1, "-n", "4"],
            ["-l", TEST1, "-f", "4"],
            ["-l", "does-not-exist.txt"],
        ],
    )
    def test_bad_arguments_exit_with_usage_error(self, argv, capsys):
        with pytest.raises(SystemExit) as exc:
            main(argv)
        assert exc.value.code == 2

    def test_asymmetric_file_rejected(self, tmp_path, capsys):
        path = tmp_path / "asym.txt"
        path.write_text("2\n0 1\n2 0\n")
        with pytest.raises(SystemExit) as exc:
            main(["-l", str(path)])
        assert exc.value.code == 2
        assert "not symmetric" in capsys.readouterr().err


class TestRandomCommand:
    def test_saves_seeded_matrix(self, tmp_path, capsys):
        path = tmp_path / "m.txt"
        assert generate.main(["4", str(path), "7"]) == 0
        assert load_distance_matrix(path) == random_distance_matrix(4, 7)
        assert "A |" in capsys.readouterr().out

    def test_default_size_prints_only(self, capsys):
        assert generate.main([]) == 0
        out = capsys.readouterr().out
        assert "E |" in out
        assert "F |" not in out

    def test_size_below_two_rejected(self, capsys):
        with pytest.raises(SystemExit):
            generate.main(["1"])


class TestCheckSolCommand:
    @pytest.mark.parametrize("path, mindist", [(TEST1, "80"), (TEST2, "5")])
    def test_expected_optimum(self, path, mindist, capsys):
        assert checksol.main([path, mindist]) == 0
        assert f"tsp dist: {mindist} (expected: {mindist})" in capsys.readouterr().out

    def test_wrong_optimum_fails(self, capsys):
        assert checksol.main([TEST1, "79"]) == 1
        assert "tsp dist: 80 (expected: 79)" in capsys.readouterr().out

    def test_check_solution_raises_on_drift(self, capsys):
        D = DistanceMatrix([[0, 5], [5, 0]])
        assert checksol.check_solution(D, 10).tour == [0, 1, 0]
        with pytest.raises(RuntimeError, match="Baseline drift"):
            checksol.check_solution(D, 9)
