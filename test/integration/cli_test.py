import pytest

from satiter.cli.cli import cli, parse_args

SAT_CNF = """c a satisfiable formula
p cnf 3 3
1 2 0
-1 -2 0
2 3 0
"""

UNSAT_CNF = """p cnf 1 2
1 0
-1 0
"""


@pytest.fixture
def cnf(tmp_path):
    def write(text, name="formula.cnf"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return write


def models_of(output):
    return [
        [int(x) for x in line.split()[1:-1]]
        for line in output.splitlines()
        if line.startswith("v ")
    ]


def test_parse_args():
    args = parse_args(["enumerate", "f.cnf", "--limit", "3", "--engine", "glucose4"])
    assert args.command == "enumerate"
    assert args.filename == "f.cnf"
    assert args.limit == 3
    assert args.engine == "glucose4"
    assert args.async_queue_size is None
    assert args.budget == 0


def test_solve_sat(cnf, capsys):
    assert cli(["solve", cnf(SAT_CNF)]) == 0

    out = capsys.readouterr().out
    assert "s SATISFIABLE" in out
    [model] = models_of(out)
    values = set(model)
    assert len(model) == 3
    assert all(any(lit in values for lit in c) for c in [[1, 2], [-1, -2], [2, 3]])


def test_solve_unsat(cnf, capsys):
    assert cli(["solve", cnf(UNSAT_CNF)]) == 0

    out = capsys.readouterr().out
    assert "s UNSATISFIABLE" in out
    assert models_of(out) == []


def test_solve_variables(cnf, capsys):
    assert cli(["solve", cnf("p cnf 1 1\n1 0\n"), "--variables", "4"]) == 0
    [model] = models_of(capsys.readouterr().out)
    assert model == [1, -2, -3, -4]


@pytest.mark.parametrize("extra", [[], ["--async_queue_size", "1"], ["--engine", "pysmt"]])
def test_enumerate(cnf, capsys, extra):
    assert cli(["enumerate", cnf(SAT_CNF)] + extra) == 0

    out = capsys.readouterr().out
    models = models_of(out)
    assert sorted(models) == [[-1, 2, -3], [-1, 2, 3], [1, -2, 3]]
    assert "c models: 3" in out


@pytest.mark.parametrize("extra", [[], ["--async_queue_size", "0"]])
def test_enumerate_limit(cnf, capsys, extra):
    assert cli(["enumerate", cnf("p cnf 8 0\n"), "--limit", "5"] + extra) == 0

    out = capsys.readouterr().out
    assert len(models_of(out)) == 5
    assert "c models: 5" in out


def test_malformed_file(cnf, capsys):
    assert cli(["solve", cnf("p cnf 2 1\n1 x 0\n")]) == 1
    assert cli(["enumerate", cnf("1 2 0\n")]) == 1


def test_missing_file(tmp_path):
    assert cli(["solve", str(tmp_path / "missing.cnf")]) == 1


def test_log_file(cnf, tmp_path, capsys):
    log = tmp_path / "satiter.log"
    assert cli(["--log", str(log), "solve", cnf(SAT_CNF), "--verbosity", "1"]) == 0
    assert "Engine returned SATISFIABLE" in log.read_text()
