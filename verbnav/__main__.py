"""CLI entry point for the verbnav navigator."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import ConfigError
from .services.conf_loader import build_registry
from .services.error_mapper import map_exception
from .services.verb_store import VerbRegistry

console = Console()


def list_verbs(registry: VerbRegistry) -> None:
    """Print the registry as a table."""
    table = Table(title="Verbs")
    table.add_column("Invocation", style="cyan")
    table.add_column("Name")
    table.add_column("Execution", style="green")
    for key, verb in registry.items():
        table.add_row(escape(key), escape(verb.name), escape(verb.exec_pattern))
    console.print(table)


def run_tui(registry: VerbRegistry, root: Path) -> None:
    """Run the Textual navigator."""
    from .tui.textual_app import VerbnavTextualApp

    VerbnavTextualApp(registry, root).run()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="verbnav - file tree navigator with verbs")
    parser.add_argument("root", nargs="?", default=".", help="Directory to navigate")
    parser.add_argument("--config", type=Path, default=None, help="Verbs TOML file")
    parser.add_argument(
        "--no-defaults",
        action="store_true",
        help="Do not load the built-in default verbs",
    )
    parser.add_argument("--list-verbs", action="store_true", help="Print verbs and exit")
    args = parser.parse_args(argv)

    try:
        registry = build_registry(
            args.config, use_defaults=False if args.no_defaults else None
        )
    except ConfigError as exc:
        mapped = map_exception(exc)
        console.print(f"[red]{escape(mapped.message)}[/red]")
        if mapped.hint:
            console.print(f"[dim]{escape(mapped.hint)}[/dim]")
        return 2

    if args.list_verbs:
        list_verbs(registry)
        return 0

    run_tui(registry, Path(args.root))
    return 0


if __name__ == "__main__":
    sys.exit(main())
