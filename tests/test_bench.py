"""Tests for benchmark selection in scripts/bench.py."""

import importlib.util
from pathlib import Path

import pytest

from fplib.cli import OPERATIONS

BENCH_PATH = Path(__file__).resolve().parent.parent / "scripts" / "bench.py"


@pytest.fixture(scope="module")
def bench():
    """Load scripts/bench.py as a module without running main()."""
    spec = importlib.util.spec_from_file_location("bench", BENCH_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSelectBenchmarks:
    """Tests for select_benchmarks."""

    def test_no_pattern_runs_everything(self, bench) -> None:
        selected, run_vector = bench.select_benchmarks(None)
        assert list(selected) == list(OPERATIONS)
        assert run_vector

    def test_vector_only_pattern(self, bench) -> None:
        """'aq15' names only the vector multiply and must not be rejected."""
        selected, run_vector = bench.select_benchmarks("aq15")
        assert selected == {}
        assert run_vector

    def test_scalar_only_pattern(self, bench) -> None:
        selected, run_vector = bench.select_benchmarks("sin")
        assert list(selected) == [n for n in OPERATIONS if "sin" in n]
        assert not run_vector

    def test_case_insensitive(self, bench) -> None:
        assert bench.select_benchmarks("AQ15")[1]

    def test_no_match(self, bench) -> None:
        assert bench.select_benchmarks("nothing") == ({}, False)

    def test_main_runs_vector_for_aq15(self, bench, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.argv", ["bench.py", "aq15", "-n", "256"])
        bench.main()
        out = capsys.readouterr().out
        assert "Vector primitives" in out
        assert "Scalar primitives" not in out

    def test_main_exits_on_no_match(self, bench, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.argv", ["bench.py", "nothing"])
        with pytest.raises(SystemExit) as exc:
            bench.main()
        assert exc.value.code == 1
        assert "No primitive matching 'nothing'" in capsys.readouterr().out
