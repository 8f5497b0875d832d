"""
Command-line interface for mailc.

Subcommands:
- generate: Parse HTML email templates and generate typed Python modules
- version: Show the mailc version
- help: Show help
"""

from pathlib import Path

import typer
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from mailc import __version__
from mailc.pipeline import compile_templates
from mailc.utils.config import load_config
from mailc.utils.logger import setup_logger
from mailc.utils.timestamp import now

app = typer.Typer(
    add_completion=False,
    help="mailc - Type-safe email templates",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("help")
def help_command(ctx: typer.Context):
    """Show this help message."""
    typer.echo(ctx.parent.get_help())


@app.command("version")
def version_command():
    """Show the current mailc version."""
    typer.echo(f"mailc version {__version__}")


@app.command("generate")
def generate_command(
    input_dir: Path = typer.Option(
        None,
        "--input",
        "-i",
        help="Directory containing HTML email templates (default: ./emails)",
        file_okay=False,
    ),
    output_dir: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Directory to write generated Python modules (default: ./internal/emails)",
        file_okay=False,
    ),
    version: str = typer.Option(
        None,
        "--version",
        "-v",
        help="Version string to embed in generated files",
    ),
    config_file: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file (default: mailc.yaml if present)",
        dir_okay=False,
    ),
    log_dir: Path = typer.Option(
        None,
        "--log-dir",
        help="Directory for this session's log (default: <logs_path>/generate_<timestamp>)",
        file_okay=False,
    ),
):
    """
    Parse HTML templates and generate typed Python modules.

    Examples:\n

        $ mailc generate -i ./emails -o ./internal/emails

        $ mailc generate --version v1.2.0
    """
    try:
        config = load_config(
            config_file,
            overrides={
                "input": str(input_dir) if input_dir else None,
                "output": str(output_dir) if output_dir else None,
                "version": version,
            },
        )
    except (FileNotFoundError, OmegaConfBaseException) as e:
        typer.secho(f"Error: invalid configuration: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    input_path = Path(config.input)
    output_path = Path(config.output)

    if not input_path.is_dir():
        typer.secho(
            f"Error: input directory does not exist: {input_path}", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)

    session_log_dir = log_dir or Path(config.logs_path) / f"generate_{now()}"
    setup_logger(
        context_name="compile",
        log_dir=session_log_dir,
        extra_provenance={
            "Input": input_path,
            "Output": output_path,
            "Version": config.version,
        },
    )

    result = compile_templates(
        input_path,
        output_path,
        config.version,
        type_aliases=OmegaConf.to_container(config.type_aliases),
    )

    if not result.success:
        typer.secho(f"Error: {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(
        f"Generated {result.template_count} email templates into {output_path}",
        fg=typer.colors.GREEN,
    )


if __name__ == "__main__":
    app()
