"""screenplay targets — inspect the locator catalogs."""

from __future__ import annotations

import typer

from screenplay.core.exceptions import LocatorError
from screenplay.core.locator import FallbackChain, Target
from screenplay.healthtech.ui import CATALOG

targets_app = typer.Typer(
    name="targets",
    help="Inspect the page locator catalogs.",
    no_args_is_help=True,
)


def _page(name: str) -> dict[str, Target | FallbackChain]:
    targets = CATALOG.get(name)
    if targets is None:
        typer.echo(f"Error: unknown page '{name}' (pages: {', '.join(CATALOG)})", err=True)
        raise typer.Exit(code=1)
    return targets


def _links(entry: Target | FallbackChain) -> tuple[Target, ...]:
    return entry.targets if isinstance(entry, FallbackChain) else (entry,)


@targets_app.command(name="list")
def targets_list(
    page: str | None = typer.Argument(None, help="Page name (login, nurse, doctor)."),
) -> None:
    """List Targets by page. Parameterized Targets show their arity."""
    pages = [page] if page else list(CATALOG)
    for name in pages:
        typer.echo(f"{name}:")
        for constant, entry in _page(name).items():
            links = _links(entry)
            arity = links[0].arity
            params = f" ({arity} param{'s' if arity != 1 else ''})" if arity else ""
            fallback = f" [+{len(links) - 1} fallback]" if len(links) > 1 else ""
            typer.echo(f"  {constant:<28} {entry.describe()}{params}{fallback}")


@targets_app.command(name="render")
def targets_render(
    page: str = typer.Argument(help="Page name (login, nurse, doctor)."),
    name: str = typer.Argument(help="Target constant, e.g. PATIENT_CARD."),
    params: list[str] | None = typer.Argument(None, help="Parameters for the template."),
) -> None:
    """Print the escaped query a Target yields for the given parameters."""
    entry = _page(page).get(name.upper())
    if entry is None:
        typer.echo(f"Error: no target '{name}' on page '{page}'", err=True)
        raise typer.Exit(code=1)
    try:
        for target in _links(entry):
            typer.echo(str(target.locate(*(params or []))))
    except LocatorError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from None
