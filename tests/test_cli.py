from philo.cli import main


def test_invalid_arguments_report_error(capsys):
    assert main(["5"]) == -1
    assert capsys.readouterr().out == "ERROR\nPlease enter 4 or 5 positive integers\n"


def test_non_numeric_argument_rejected(capsys):
    assert main(["5", "800", "abc", "200"]) == -1
    assert capsys.readouterr().out.startswith("ERROR\n")


def test_single_philosopher_dies(capsys):
    assert main(["1", "100", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split("\t")[1:] == ["1", "has taken a fork"]
    assert lines[-1].split("\t")[1:] == ["1", "died"]


def test_meal_limit_finishes(capsys):
    assert main(["2", "800", "50", "50", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "everyone finished eating"
    assert not any(line.endswith("\tdied") for line in lines)


def test_reads_sys_argv_when_none(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["philo", "0", "800", "200", "200"])
    assert main() == -1
    assert "ERROR" in capsys.readouterr().out