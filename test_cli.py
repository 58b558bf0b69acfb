import re

import pytest

from powbench import generate_dataset
from powbench.tools.bench_cli import main

LINE = re.compile(r"^(Traditional loop|Sequential pipeline|Parallel pipeline): \d+ ms$")


def test_prints_three_lines_in_order(capsys):
    assert main(["--size", "2000", "--seed", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(LINE.match(line) for line in lines)
    assert [line.split(":")[0] for line in lines] == [
        "Traditional loop", "Sequential pipeline", "Parallel pipeline",
    ]


def test_zero_size(capsys):
    assert main(["--size", "0"]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 3


def test_verify(capsys):
    assert main(["--size", "500", "--seed", "1", "--workers", "3",
                 "--warmup", "1", "--repeat", "3", "--verify"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[-1] == "Verified: results match"


def test_verify_failure(capsys, monkeypatch):
    monkeypatch.setattr("powbench.tools.bench_cli.results_match", lambda results: False)
    assert main(["--size", "10", "--verify"]) == 1
    assert "Verification failed" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [
    ["--size", "-5"],
    ["--low", "10", "--high", "1"],
    ["--workers", "0"],
    ["--repeat", "0"],
    ["--warmup", "-1"],
    ["--size", "lots"],
    ["--size", "10", "--high", "inf"],
    ["--size", "10", "--low=-inf"],
    ["--size", "10", "--low", "nan"],
])
def test_invalid_arguments_exit_2(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2


def test_benchmark_script(capsys, monkeypatch):
    from benchmarks.micro import pow_heavy

    monkeypatch.setattr(pow_heavy, "generate_dataset", lambda: generate_dataset(100, seed=0))
    pow_heavy.main()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert all(LINE.match(line) for line in lines)
