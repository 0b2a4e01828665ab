from typer.testing import CliRunner

from modfib.cli import app

runner = CliRunner()


def test_solve_default_variant():
    result = runner.invoke(app, ["solve"], input="10\n")
    assert result.exit_code == 0
    assert result.output == "55\n"


def test_solve_large_n():
    result = runner.invoke(app, ["solve"], input="1000000000000000000\n")
    assert result.exit_code == 0
    assert 0 <= int(result.output) < 1_000_000_007


def test_solve_baseline_variant():
    result = runner.invoke(app, ["solve", "-v", "window"], input="100\n")
    assert result.exit_code == 0
    assert result.output == "687995182\n"


def test_solve_modulus_option_and_env():
    result = runner.invoke(app, ["solve", "--modulus", "10"], input="10\n")
    assert result.output == "5\n"
    result = runner.invoke(app, ["solve"], input="10\n", env={"MODFIB_MODULUS": "7"})
    assert result.output == "6\n"


def test_solve_rejects_bad_input():
    result = runner.invoke(app, ["solve"], input="-3\n")
    assert result.exit_code == 2
    assert "non-negative" in result.output


def test_solve_rejects_small_modulus():
    result = runner.invoke(app, ["solve", "-m", "1"], input="10\n")
    assert result.exit_code != 0


def test_variants_command():
    result = runner.invoke(app, ["variants"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert [ln.split()[0] for ln in lines] == ["matrix", "table", "window"]
    assert "O(log n)" in lines[0]
