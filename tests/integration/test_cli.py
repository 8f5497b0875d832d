"""Integration tests for the mailc command-line interface."""

import shutil

import pytest
from loguru import logger
from typer.testing import CliRunner

from mailc import __version__
from mailc.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks bound to the runner's captured streams."""
    yield
    logger.remove()


@pytest.fixture
def emails_dir(tmp_path, fixtures_path):
    destination = tmp_path / "emails"
    shutil.copytree(fixtures_path, destination)
    return destination


@pytest.mark.integration
def test_version_command():
    """Test the version subcommand."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"mailc version {__version__}" in result.output


@pytest.mark.integration
def test_help_command():
    """Test the help subcommand lists the commands."""
    result = runner.invoke(app, ["help"])

    assert result.exit_code == 0
    assert "generate" in result.output


@pytest.mark.integration
def test_no_command_shows_help():
    """Test invoking without a subcommand prints help."""
    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "generate" in result.output


@pytest.mark.integration
def test_generate_command(emails_dir, tmp_path):
    """Test generate writes one module per template and reports the count."""
    out = tmp_path / "generated"

    result = runner.invoke(
        app,
        [
            "generate",
            "--input", str(emails_dir),
            "--output", str(out),
            "--version", "v1.2.3",
            "--log-dir", str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert f"Generated 4 email templates into {out}" in result.output
    assert sorted(path.name for path in out.iterdir()) == [
        "invite.email.py",
        "nosubject.email.py",
        "order-confirmation.email.py",
        "welcome.email.py",
    ]
    header = (out / "welcome.email.py").read_text().splitlines()[0]
    assert header == "# Code generated by mailc v1.2.3. DO NOT EDIT."
    assert (tmp_path / "logs" / "compile.log").exists()


@pytest.mark.integration
def test_generate_with_config_file(emails_dir, tmp_path):
    """Test generate reads input, output and type aliases from a config file."""
    (emails_dir / "invoice.html").write_text("<!-- @type amount Money -->\n<p>{{amount}}</p>\n")
    out = tmp_path / "from-config"
    config_file = tmp_path / "mailc.yaml"
    config_file.write_text(
        f"input: {emails_dir}\noutput: {out}\ntype_aliases:\n  Money: decimal.Decimal\n"
    )

    result = runner.invoke(
        app, ["generate", "--config", str(config_file), "--log-dir", str(tmp_path / "logs")]
    )

    assert result.exit_code == 0, result.output
    source = (out / "invoice.email.py").read_text()
    assert "import decimal" in source
    assert "Amount: decimal.Decimal" in source


@pytest.mark.integration
def test_generate_missing_input_directory(tmp_path):
    """Test a missing input directory exits non-zero with a diagnostic."""
    result = runner.invoke(
        app,
        [
            "generate",
            "--input", str(tmp_path / "nope"),
            "--output", str(tmp_path / "out"),
            "--log-dir", str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 1
    assert "input directory does not exist" in result.output


@pytest.mark.integration
def test_generate_empty_input_directory(tmp_path):
    """Test an input directory without templates exits non-zero."""
    empty = tmp_path / "empty"
    empty.mkdir()

    result = runner.invoke(
        app,
        [
            "generate",
            "--input", str(empty),
            "--output", str(tmp_path / "out"),
            "--log-dir", str(tmp_path / "logs"),
        ],
    )

    assert result.exit_code == 1
    assert "No .html files found" in result.output


@pytest.mark.integration
def test_generate_missing_config_file(tmp_path):
    """Test an explicit config file that does not exist is a usage failure."""
    result = runner.invoke(app, ["generate", "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "invalid configuration" in result.output
