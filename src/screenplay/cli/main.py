"""screenplay CLI entry point."""

import logging

import typer

app = typer.Typer(
    name="screenplay",
    help="Screenplay — acceptance testing DSL for the HealthTech triage UI",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        from screenplay import __version__

        typer.echo(f"screenplay {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Screenplay — acceptance testing DSL for the HealthTech triage UI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -- Register commands --------------------------------------------------------

from screenplay.cli.commands.config_cmd import config_app  # noqa: E402
from screenplay.cli.commands.targets_cmd import targets_app  # noqa: E402

app.add_typer(config_app, name="config")
app.add_typer(targets_app, name="targets")
