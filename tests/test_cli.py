"""
Command-line entry point tests
Runs the typer app end to end with stdin supplied by CliRunner
"""
from typer.testing import CliRunner

from dir_commander import GOODBYE_MESSAGE, app

runner = CliRunner()


def test_exit_code_zero_on_exit():
    result = runner.invoke(app, [], input="3\n")

    assert result.exit_code == 0
    assert result.output.count(GOODBYE_MESSAGE) == 1


def test_malformed_input_does_not_crash():
    result = runner.invoke(app, [], input="abc\n7\n3\n")

    assert result.exit_code == 0
    assert "Please enter a number" in result.output
    assert "Invalid choice" in result.output
    assert result.output.count(GOODBYE_MESSAGE) == 1


def test_end_of_input_exits_cleanly():
    result = runner.invoke(app, [], input="")

    assert result.exit_code == 0
    assert "Input closed" in result.output


def test_copy_through_cli(tmp_path):
    sandbox = tmp_path / "sandbox"
    sandbox.mkdir()
    (sandbox / "a.txt").write_text("hello")
    docs = sandbox / "docs"

    answers = ["1", str(sandbox), "3", "a.txt", str(docs), "y", "3"]
    result = runner.invoke(app, [], input="\n".join(answers) + "\n")

    assert result.exit_code == 0
    assert (docs / "a.txt").read_text() == "hello"
    assert (sandbox / "a.txt").read_text() == "hello"


def test_stay_in_directory_flag(tmp_path):
    (tmp_path / "a.txt").write_text("hello")

    answers = ["1", str(tmp_path), "1", "6", "a.txt", "7", "3"]
    result = runner.invoke(app, ["--stay-in-directory"], input="\n".join(answers) + "\n")

    assert result.exit_code == 0
    assert str(tmp_path / "a.txt") in result.output
    assert "hello" in result.output
    assert result.output.count(GOODBYE_MESSAGE) == 1


def test_log_file_records_operations(tmp_path):
    sandbox = tmp_path / "sandbox"
    sandbox.mkdir()
    log_file = tmp_path / "commander.log"

    answers = ["2", str(sandbox), "docs", "3"]
    result = runner.invoke(app, ["--log-file", str(log_file)], input="\n".join(answers) + "\n")

    assert result.exit_code == 0
    assert (sandbox / "docs").is_dir()
    assert "Created directory" in log_file.read_text()


def test_help_says_no_arguments_are_needed():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "No arguments are needed" in result.output
