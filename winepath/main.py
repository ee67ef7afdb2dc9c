from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from winepath.config import WineConfig
from winepath.errors import WinePathError
from winepath.log import setup_logging

app = typer.Typer(
    name="winepath",
    help="Convert between Wine and native file paths",
    add_completion=False,
)
console = Console(emoji=False)
err_console = Console(stderr=True, emoji=False)


def load_config(prefix: Path | None) -> WineConfig:
    if prefix is not None:
        return WineConfig.from_prefix(prefix)
    return WineConfig.from_env()


def show_drives(config: WineConfig) -> None:
    table = Table(title=f"Drives in {config.prefix}")
    table.add_column("Drive", style="cyan")
    table.add_column("Path", style="dim")
    for letter, path in config.drives:
        table.add_row(f"{letter}:", str(path))
    console.print(table)


def fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, highlight=False)
    raise typer.Exit(1)


@app.command(help="Convert a Wine path to a native path (-u, default) or a native path to a Wine path (-w)")
def convert(
    path: Annotated[str | None, typer.Argument(help="Path to convert")] = None,
    unix: Annotated[bool, typer.Option("--unix", "-u", help="Wine path -> native path (default)")] = False,
    windows: Annotated[bool, typer.Option("--windows", "-w", help="Native path -> Wine path")] = False,
    prefix: Annotated[Path | None, typer.Option("--prefix", "-p", help="Wine prefix (default: $WINEPREFIX or ~/.wine)")] = None,
    drives: Annotated[bool, typer.Option("--drives", help="List drive mappings and exit")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log drive resolution")] = False,
) -> None:
    setup_logging(verbose)

    if unix and windows:
        raise typer.BadParameter("-u and -w are mutually exclusive")
    if path is None and not drives:
        raise typer.BadParameter("missing PATH", param_hint="PATH")

    try:
        config = load_config(prefix)
        if drives:
            show_drives(config)
            return

        if windows:
            native = Path(path).resolve(strict=True)
            result = str(config.to_wine_path(native))
        else:
            result = str(config.to_native_path(path))
    except WinePathError as e:
        fail(str(e))
    except OSError as e:
        fail(f"cannot resolve {path}: {e.strerror or e}")

    console.print(result, soft_wrap=True, markup=False, highlight=False)


if __name__ == "__main__":
    app()
