"""
CLI de tuiform.

Comandos:
- demo: ejecuta un formulario de ejemplo y guarda el resultado en JSON
- themes: lista los temas disponibles
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich import box

from tuiform.export import write_json
from tuiform.form import FormResult
from tuiform.runner import run_form
from tuiform.samples import SAMPLES
from tuiform.style import ThemeName, get_style

app = typer.Typer(
    name="tuiform",
    help="Formularios interactivos en la terminal.",
    no_args_is_help=True,
)

console = Console()


def _setup_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def demo(
    sample: str = typer.Argument("address", help="Formulario: address, contact, event"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Archivo JSON de salida"),
    theme: str = typer.Option("dark", "--theme", "-t", help="Tema: dark, light"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Mostrar registro de depuración"),
):
    """Ejecuta un formulario de ejemplo de forma interactiva."""
    _setup_logging(verbose)

    factory = SAMPLES.get(sample)
    if factory is None:
        console.print(f"[red]Formulario desconocido: {sample}[/red] "
                      f"(disponibles: {', '.join(SAMPLES)})")
        raise typer.Exit(1)

    try:
        style = get_style(theme)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    form = factory(style)
    result = run_form(form, console=console)

    if result != FormResult.SUBMITTED:
        console.print("[yellow]Formulario cancelado.[/yellow]")
        raise typer.Exit(1)

    if output is not None:
        write_json(form, output)
        console.print(f"[green]Datos guardados en {output}[/green]")
    console.print_json(form.to_json())


@app.command()
def themes():
    """Lista los temas disponibles."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Tema")
    table.add_column("Título")
    table.add_column("Entrada con foco")

    for name in ThemeName:
        style = get_style(name)
        table.add_row(
            name.value,
            f"[{style.title}]{style.title}[/]",
            f"[{style.input_focused}]{style.input_focused}[/]",
        )

    console.print(table)


__all__ = ["app"]
