"""Tests for the command-line interface."""

import json

from primegen.cli import main


class TestGenerate:
    """Tests for the generate command."""

    def test_prints_primes(self, capsys):
        assert main(["generate", "20"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == "2 3 5 7 11 13 17 19"

    def test_method_and_count_only(self, capsys):
        assert main(["generate", "1000", "--method", "atkin", "--count-only"]) == 0
        assert capsys.readouterr().out.strip() == "168"

    def test_json_output(self, tmp_path, capsys):
        output = tmp_path / "primes.json"
        assert main(["generate", "10", "-m", "mersenne", "-o", str(output)]) == 0

        with open(output) as f:
            document = json.load(f)
        assert document == {"method": "mersenne", "limit": 10, "count": 2, "primes": [3, 7]}

    def test_negative_limit(self, capsys):
        assert main(["generate", "-5"]) == 2
        assert "limit must be >= 0" in capsys.readouterr().err


class TestCompare:
    """Tests for the compare command."""

    def test_agree(self, capsys):
        assert main(["compare", "500"]) == 0
        assert "All methods agree" in capsys.readouterr().out

    def test_disagree(self, capsys):
        assert main(["compare", "100", "--methods", "atkin,mersenne"]) == 1
        assert "MISMATCH" in capsys.readouterr().out

    def test_unknown_method(self, capsys):
        assert main(["compare", "100", "--methods", "atkin,bogus"]) == 2
        assert "Unknown method" in capsys.readouterr().err


class TestBenchmark:
    """Tests for the benchmark command."""

    def test_runs_selected_methods(self, capsys):
        assert main(["benchmark", "100", "--methods", "eratosthenes,atkin", "--repeat", "1"]) == 0
        out = capsys.readouterr().out
        assert "eratosthenes" in out
        assert "atkin" in out
        assert "trial-division" not in out

    def test_invalid_repeat(self, capsys):
        assert main(["benchmark", "100", "--repeat", "0"]) == 2


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
