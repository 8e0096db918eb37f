"""Command line entry point for automata-lab."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

import click

from automata_lab import __version__
from automata_lab.config import Settings, load_settings
from automata_lab.definitions import available_kinds, create_automaton
from automata_lab.engine import Severity
from automata_lab.errors import AutomatonError, ConfigError
from automata_lab.logging import configure_logging, get_logger
from automata_lab.runner import animate as animate_run
from automata_lab.runner import validate as validate_run
from automata_lab.visualizer import history_frame, render

DEFAULT_CONFIG = "./automata.yaml"

SEVERITY_COLORS = {
    Severity.INFO: None,
    Severity.SYSTEM: "blue",
    Severity.SUCCESS: "green",
    Severity.ERROR: "red",
}


def echo_notification(notification) -> None:
    """Print an engine notification as a log line."""
    click.secho(f"> {notification.message}", fg=SEVERITY_COLORS[notification.severity])


def report(outcome, automaton, trace: bool, as_json: bool) -> None:
    if as_json:
        data = {
            "input": outcome.text,
            "verdict": outcome.verdict.value,
            "final_state": outcome.final_state.id,
            "conclusion": outcome.conclusion,
            "history": [
                {"from": r.source.id, "to": r.target.id, "symbol": r.symbol}
                for r in automaton.history
            ],
        }
        click.echo(json.dumps(data, indent=2))
        return

    color = "green" if outcome.accepted else "red"
    click.secho(f"Result: {outcome.verdict.value.upper()}", fg=color, bold=True)
    click.echo(f"Conclusion: {outcome.conclusion}")
    if trace and automaton.history:
        click.echo(history_frame(automaton).to_string())
    click.echo(f"End: finished in state {outcome.final_state.label}.")


kind_argument = click.argument("kind", type=click.Choice(available_kinds()))


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_CONFIG,
    help="Path to a YAML settings file",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warn", "warning", "error"], case_sensitive=False),
    default=None,
    help="Logging level (overrides the settings file)",
)
@click.option(
    "--log-format",
    type=click.Choice(["json", "text"], case_sensitive=False),
    default=None,
    help="Log format (overrides the settings file)",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx: click.Context, config: Path, log_level: Optional[str], log_format: Optional[str]) -> None:
    """Step deterministic finite automata over input strings."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    configure_logging(level=log_level or settings.log_level, format_type=log_format or settings.log_format)
    ctx.obj = settings


@cli.command()
def kinds() -> None:
    """List the available automata."""
    for kind in available_kinds():
        click.echo(kind)


@cli.command()
@kind_argument
def grammar(kind: str) -> None:
    """Print the production rules of an automaton."""
    click.echo(create_automaton(kind).grammar)


@cli.command()
@kind_argument
def dot(kind: str) -> None:
    """Print the Graphviz source of an automaton."""
    automaton = create_automaton(kind)
    automaton.reset()
    click.echo(render(automaton).source)


@cli.command()
@kind_argument
@click.argument("text")
@click.option("--trace", is_flag=True, default=False, help="Show the step table")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output JSON")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print every engine notification")
def validate(kind: str, text: str, trace: bool, as_json: bool, verbose: bool) -> None:
    """Validate TEXT with the KIND automaton."""
    automaton = create_automaton(kind, observer=echo_notification if verbose else None)
    try:
        outcome = validate_run(automaton, text)
    except AutomatonError as e:
        raise click.ClickException(str(e)) from e
    report(outcome, automaton, trace, as_json)
    sys.exit(0 if outcome.accepted else 1)


@cli.command()
@kind_argument
@click.argument("text")
@click.option("--delay", type=float, default=None, help="Seconds between steps")
@click.pass_obj
def animate(settings: Settings, kind: str, text: str, delay: Optional[float]) -> None:
    """Step through TEXT with a pause before every symbol."""
    if delay is None:
        delay = settings.animation_delay
    if delay < 0:
        raise click.BadParameter("must be >= 0", param_hint="--delay")

    logger = get_logger("cli")
    logger.info("animation_started", kind=kind, delay=delay, length=len(text))

    automaton = create_automaton(kind, observer=echo_notification)
    outcome = asyncio.run(animate_run(automaton, text, delay=delay))
    status = "ACCEPTED" if outcome.accepted else outcome.verdict.value.upper()
    click.secho(f"Animation finished: {status}", fg="green" if outcome.accepted else "red")
    sys.exit(0 if outcome.accepted else 1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
