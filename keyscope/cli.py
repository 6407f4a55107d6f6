"""Command-line interface for keyscope.

Provides commands for:
- key: Describe a key (signature, altered notes, scale, chords)
- tokenize: Split a key name into tonic and mode
- modes: List the available modes
"""

import typer
from rich.console import Console
from rich.table import Table

from .theory import Key, all_modes, relative_key
from .theory import key as build_key
from .theory import tokenize as tokenize_key_name

app = typer.Typer(
    name="keyscope",
    help="Musical key descriptions from key names",
    rich_markup_mode="markdown",
)
console = Console()


@app.command()
def key(
    name: str = typer.Argument(..., help='Key name, e.g. "Eb major" or "f# dorian"'),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Describe a key: signature, altered notes, scale and chords."""
    k = build_key(name.strip())
    if k is None:
        console.print(f"[red]Error: Not a valid key name: {name}[/red]")
        raise typer.Exit(1)

    relative_major = relative_key(k, "major")
    relative_minor = relative_key(k, "minor")

    if json_output:
        result = k.to_dict()
        result["relative_major"] = relative_major.name if relative_major else None
        result["relative_minor"] = relative_minor.name if relative_minor else None
        console.print_json(data=result)
        return

    _show_key_table(k)
    for label, relative in (("major", relative_major), ("minor", relative_minor)):
        if relative is not None and relative.mode_name != k.mode_name:
            console.print(f"   Relative {label}: {relative.name}")


@app.command()
def tokenize(
    name: str = typer.Argument(..., help="Key name to split"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Split a key name into tonic and mode."""
    tonic, mode_type = tokenize_key_name(name)

    if json_output:
        console.print_json(data={"tonic": tonic, "mode": mode_type})
        return

    console.print(f"   Tonic: {tonic or '[dim](none)[/dim]'}")
    console.print(f"   Mode: {mode_type or '[dim](none)[/dim]'}")


@app.command()
def modes():
    """List the modes of the major scale."""
    table = Table(title="Modes")
    table.add_column("#", style="cyan")
    table.add_column("Mode", style="green")
    table.add_column("Alt", style="yellow")
    table.add_column("Chords", style="magenta")
    table.add_column("Intervals", style="blue")

    for m in all_modes():
        name = m.name
        if m.aliases:
            name += f" ({', '.join(m.aliases)})"
        table.add_row(
            str(m.mode_num),
            name,
            str(m.alt),
            f"{m.triad or 'M'} / {m.seventh}",
            " ".join(m.intervals),
        )

    console.print(table)


def _show_key_table(k: Key):
    """Display a key in a table."""
    table = Table(title=f"Key: {k.name}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Tonic", k.tonic)
    table.add_row("Mode", f"{k.mode_name} ({k.mode_num})")
    table.add_row("Signature", f"{k.alt} {k.acc}".strip())
    table.add_row("Altered notes", " ".join(k.altered_notes) or "-")
    table.add_row("Intervals", " ".join(k.intervals))
    table.add_row("Scale", " ".join(k.scale))
    table.add_row("Triad", k.triad)
    table.add_row("Seventh", k.seventh)

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
