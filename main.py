"""Dozenten-Warteschlange — Haupt-CLI.

Verwendung:
  python main.py run                      Lehrkräfte erfassen und sortiert ausgeben
  python main.py run --count 3            Nur 3 Lehrkräfte abfragen
  python main.py config init              Standard-Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich import box

console = Console()
logger = logging.getLogger(__name__)


def _configure_logging(config) -> None:
    logging.basicConfig(
        level=config.logging.level.value,
        format=config.logging.format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _load_config(config_path: Optional[Path]):
    """Lädt die Konfiguration (oder Defaults) und bricht bei ungültiger Datei ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        if config_path is not None:
            return mgr.load(config_path)
        return mgr.load_or_default()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


def _print_queue(title: str, queue) -> None:
    console.print(f"\n[bold]{title}[/bold]")
    console.print(queue.display(), markup=False, highlight=False)


# ─── RUN ──────────────────────────────────────────────────────────────────────

def _prompt_instructor(number: int):
    """Fragt eine Lehrkraft ab. Gibt None zurück wenn die Eingabe ungültig war."""
    from models.errors import InvalidArgumentError
    from models.instructor import Instructor

    console.print(f"\n[bold cyan]Lehrkraft #{number}[/bold cyan]")
    first_name = Prompt.ask("Vorname", default="", show_default=False)
    if not first_name.strip():
        console.print("[red]Fehler: Vorname darf nicht leer sein. Bitte erneut eingeben.[/red]")
        return None
    last_name = Prompt.ask("Nachname", default="", show_default=False)
    if not last_name.strip():
        console.print("[red]Fehler: Nachname darf nicht leer sein. Bitte erneut eingeben.[/red]")
        return None
    num_courses = IntPrompt.ask("Anzahl unterrichteter Kurse")
    if num_courses < 0:
        console.print("[red]Fehler: Anzahl Kurse darf nicht negativ sein. Bitte erneut eingeben.[/red]")
        return None
    try:
        return Instructor(first_name, last_name, num_courses)
    except InvalidArgumentError as e:
        console.print(f"[red]Fehler: {e}[/red]")
        return None


@click.command("run")
@click.option("--count", "-n", type=int, default=None,
              help="Anzahl abzufragender Lehrkräfte (Default aus Config).")
@click.option("--capacity", "-c", type=int, default=None,
              help="Kapazität der Warteschlange (Default aus Config).")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Pfad zu einer YAML-Konfiguration.")
def cmd_run(count: Optional[int], capacity: Optional[int], config_path: Optional[Path]):
    """Lehrkräfte interaktiv erfassen, dann nach Nachname und Kursen sortieren."""
    from analysis.ranking import ranking_by_all_keys
    from models.errors import InstructorQueueError
    from models.instructor_queue import InstructorQueue

    config = _load_config(config_path)
    _configure_logging(config)

    count = count if count is not None else config.queue.instructor_count
    capacity = capacity if capacity is not None else config.queue.capacity
    if count < 1 or count > capacity:
        console.print(
            f"[red]Ungültige Anzahl {count}: erlaubt ist 1 bis {capacity}.[/red]"
        )
        sys.exit(1)

    try:
        queue = InstructorQueue(capacity)
    except InstructorQueueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    console.print(Panel(
        f"Bitte geben Sie die Daten von [bold]{count}[/bold] Lehrkräften ein.",
        border_style="cyan",
    ))

    number = 1
    while number <= count:
        instructor = _prompt_instructor(number)
        if instructor is None:
            continue
        try:
            queue.enqueue(instructor)
        except InstructorQueueError as e:
            console.print(f"[red]Fehler: {e}[/red]")
            console.print("Bitte diese Lehrkraft erneut eingeben.")
            continue
        number += 1

    logger.info(f"{queue.size()} Lehrkräfte erfasst")
    _print_queue("Ursprüngliche Reihenfolge:", queue)

    try:
        for key, ranked in ranking_by_all_keys(queue).items():
            _print_queue(f"Sortiert nach {key.label} (absteigend):", ranked)
    except InstructorQueueError as e:
        console.print(f"[red]Fehler beim Sortieren: {e}[/red]")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Standard-Konfiguration als YAML an."""
    from config.defaults import default_app_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]--force[/bold] zum Überschreiben."
        )
        return
    path = mgr.save(default_app_config())
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {path}")


@cmd_config.command("show")
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Pfad zu einer YAML-Konfiguration.")
def config_show(config_path: Optional[Path]):
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config(config_path)

    table = Table(title="Konfiguration", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    table.add_row("Kapazität", str(config.queue.capacity))
    table.add_row("Anzahl Lehrkräfte", str(config.queue.instructor_count))
    table.add_row("Log-Level", config.logging.level.value)
    console.print(table)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
def cli():
    """Dozenten-Warteschlange: erfassen, entnehmen, absteigend sortieren.

    Starten Sie mit: python main.py run
    """


def main():
    cli()


# Befehle registrieren
cli.add_command(cmd_run)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
