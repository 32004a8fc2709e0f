"""
Console Frontend for Depositbook

This is the menu-driven interface the user types into.

DESIGN PRINCIPLES:
1. Re-prompt until input is valid, never guess a value
2. Every error is printed, in plain language
3. No error ends the session; only "Exit" or end of input does
4. Log lines go to stderr, never between the prompts
"""

from typing import Annotated, Optional

import typer

from depositbook import __version__
from depositbook.config import get_settings, validate_all_settings
from depositbook.errors import DepositbookError
from depositbook.events import configure_logging
from depositbook.models.deposit import DepositPlan
from depositbook.orchestrator import DepositorSession, create_app_components
from depositbook.validation import format_amount


app = typer.Typer(no_args_is_help=True, add_completion=False)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

MENU = """
Select an option:
1. Add Depositor
2. List Depositors
3. View Total Deposits
4. Deposit Amount
5. Exit"""


def _read_name(session: DepositorSession) -> str:
    while True:
        text = typer.prompt("Enter depositor name (letters only)")
        result = session.validator.validate_name(text)
        if result.is_valid:
            return result.value
        typer.echo(session.validator.get_user_friendly_summary(result), err=True)


def _read_plan(session: DepositorSession) -> DepositPlan:
    while True:
        text = typer.prompt("Choose deposit strategy (1: Normal, 2: Fixed)")
        result = session.validator.validate_plan_choice(text)
        if result.is_valid:
            return result.value
        typer.echo(session.validator.get_user_friendly_summary(result), err=True)


def _read_amount(session: DepositorSession) -> str:
    while True:
        text = typer.prompt("Enter deposit amount")
        result = session.validator.validate_amount_text(text)
        if result.is_valid:
            return text
        typer.echo(session.validator.get_user_friendly_summary(result), err=True)


def add_depositor(session: DepositorSession) -> None:
    name = _read_name(session)
    plan = _read_plan(session)
    result = session.register_depositor(name, plan.value)
    typer.echo(result.message, err=not result.success)


def list_depositors(session: DepositorSession) -> None:
    listing = session.list_depositors()
    if listing.is_empty:
        typer.echo("No depositors were added.")
        return

    typer.echo("\nList of depositors:")
    for row in listing.depositors:
        if row.reported_balance is not None:
            balance = format_amount(row.reported_balance)
        else:
            balance = f"unavailable ({row.balance_error})"
        typer.echo(
            f"Depositor ID: {row.depositor_id}, Name: {row.name}, "
            f"Deposit Amount: {balance}"
        )


def show_total(session: DepositorSession) -> None:
    totals = session.total_deposits()
    for depositor_id in totals.skipped:
        typer.echo(
            f"Warning: balance of {depositor_id} could not be computed "
            "and was left out of the total.",
            err=True,
        )
    if not totals.has_deposits:
        typer.echo("No deposits have been made yet.")
    else:
        typer.echo(f"Total deposits: {format_amount(totals.total)}")


def deposit_amount(session: DepositorSession) -> None:
    depositor_id = typer.prompt("Enter depositor ID to deposit to")
    amount_text = _read_amount(session)

    outcome = session.make_deposit(depositor_id, amount_text)
    if outcome.applied:
        typer.echo(outcome.message)
    elif outcome.found:
        typer.echo(f"Error: {outcome.message}", err=True)
    else:
        typer.echo(outcome.message, err=True)


ACTIONS = {
    "1": add_depositor,
    "2": list_depositors,
    "3": show_total,
    "4": deposit_amount,
}


def run_session(session: DepositorSession) -> None:
    """Menu loop. Returns on "5" or end of input."""
    session.start()
    try:
        while True:
            typer.echo(MENU)
            try:
                choice = typer.prompt("Enter your choice").strip()
            except typer.Abort:
                break

            if choice == "5":
                typer.echo("Exiting program.")
                break

            action = ACTIONS.get(choice)
            if action is None:
                typer.echo("Invalid choice. Please try again.", err=True)
                continue

            try:
                action(session)
            except typer.Abort:
                break
            except DepositbookError as e:
                typer.echo(f"Error: {e}", err=True)
    finally:
        session.end()


def version_callback(value: bool):
    if value:
        typer.echo(f"Depositbook {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option(help="Show version information", callback=version_callback)
    ] = False,
):
    """
    Depositbook CLI
    """


@app.command()
def run(
    log_level: Annotated[
        Optional[str], typer.Option(help="Log level for stderr (default from settings)")
    ] = None,
    seed: Annotated[
        Optional[int], typer.Option(help="Seed for reproducible depositor IDs")
    ] = None,
):
    """Start an interactive depositor session"""
    settings = get_settings()
    level = (log_level or settings.app.log_level).upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")
    configure_logging(level)

    session = create_app_components(settings=settings, seed=seed)
    run_session(session)


@app.command("check-config")
def check_config():
    """Validate settings from the environment and .env"""
    results = validate_all_settings()
    failed = False
    for name in ("ids", "plans", "app"):
        if results.get(name):
            typer.echo(f"{name}: ok")
        else:
            failed = True
            typer.echo(f"{name}: {results.get(f'{name}_error')}", err=True)
    if failed:
        raise typer.Exit(code=1)
