import pytest

from run_simulation import main


def test_silent_run(write_cities, capsys):
    path = write_cities("0 0\n3 4\n")
    assert main(["-n", "5", "-m", "0", "-f", path, "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "POSSIBLE PATHS" not in out
    assert "length=" not in out
    assert "BEST LENGTH: 10.0000" in out
    assert "SIMULATED PATHS: 5" in out


def test_verbose_run_prints_each_trial(write_cities, capsys):
    path = write_cities("0 0\n1 0\n1 1\n0 1\n")
    assert main(["-n", "3", "-m", "1", "-f", path, "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("POSSIBLE PATHS:\n")
    assert out.count("length=") == 3
    assert "legs:" not in out


def test_extra_mode_prints_legs(write_cities, capsys):
    path = write_cities("0 0\n3 4\n")
    assert main(["-n", "2", "-m", "2", "-f", path, "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("legs: 5.0000, 5.0000") == 2
    assert "DISTANCE MATRIX:" in out


def test_zero_trials_reports_no_result(write_cities, capsys):
    path = write_cities("0 0\n3 4\n")
    assert main(["-n", "0", "-m", "0", "-f", path]) == 0
    assert "no result" in capsys.readouterr().out


@pytest.mark.parametrize("args, message", [
    (["-n", "abc", "-m", "0"], "number of simulations must be an integer"),
    (["-n", "5", "-m", "3"], "invalid mode"),
    (["-n", "5", "-m", "x"], "invalid mode"),
])
def test_bad_parameters(write_cities, capsys, args, message):
    path = write_cities("0 0\n3 4\n")
    assert main(args + ["-f", path]) == 1
    err = capsys.readouterr().err
    assert err.startswith("mctsp: error: ")
    assert message in err


def test_missing_file(tmp_path, capsys):
    assert main(["-n", "5", "-m", "0", "-f", str(tmp_path / "none.txt")]) == 1
    assert "no such file or directory" in capsys.readouterr().err


def test_incompatible_file(write_cities, capsys):
    path = write_cities("0 0\n1 2 3\n")
    assert main(["-n", "5", "-m", "0", "-f", path]) == 1
    assert "expected two numbers" in capsys.readouterr().err


def test_required_options():
    with pytest.raises(SystemExit) as exc:
        main(["-n", "5"])
    assert exc.value.code == 2
