"""
ReviewRot CLI

Examples:
    # How stale are a business's reviews?
    reviewrot rot "Joe's Plumbing Austin"

    # Full profile audit as JSON, piped to jq
    reviewrot audit "Joe's Plumbing Austin" -f json -q | jq '.overall_score'

    # Score lead and deliver it to Airtable / webhook / Slack
    reviewrot rot "Joe's Plumbing Austin" --email owner@example.com --notify

    # Offline: rot score for a number of days
    reviewrot score 45

    # Check configuration
    reviewrot check
"""

import asyncio
import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .api import ReviewRotService
from .config import load_config
from .errors import InputValidationError
from .scoring import score_rot
from .sinks import run_post_response_tasks

# Progress to stderr, data to stdout
console = Console(stderr=True)
logger = logging.getLogger(__name__)

CLI_EMAIL = "cli@localhost"


def setup_logging(verbose: bool, quiet: bool, debug: bool) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # Suppress noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def score_color(score: int, higher_is_better: bool = True) -> str:
    """Rich color for a 0-100 score."""
    if not higher_is_better:
        score = 100 - score
    return "green" if score >= 70 else "yellow" if score >= 40 else "red"


def display_rot(response: dict) -> None:
    """Rot check summary panel."""
    rot = response["rot_score"]
    color = score_color(rot, higher_is_better=False)

    console.print(
        Panel.fit(
            f"[bold]{response['business_name']}[/bold]\n"
            f"{response['address']}\n\n"
            f"Rot Score: [{color}]{rot}[/{color}]  ({response['status']}, urgency {response['urgency']})\n"
            f"Days since last review: {response['days_since_review']}\n"
            f"Days until danger zone: {response['days_until_danger']}\n"
            f"Reviews: {response['total_reviews']}  Rating: {response['avg_rating']}",
            border_style=color,
        )
    )


def display_audit(response: dict) -> None:
    """Audit score table plus issues and recommendations."""
    table = Table(title=response["business_name"], show_header=True, header_style="bold magenta")
    table.add_column("Factor", style="cyan")
    table.add_column("Score", justify="right")

    rows = [
        ("Review health", response["review_health_score"]),
        ("Profile completeness", response["profile"]["score"]),
        ("Photos", response["photos"]["score"]),
        ("Review responses", response["responses"]["score"]),
    ]
    for label, value in rows:
        if value is None:
            # Provider does not report this factor
            table.add_row(label, "[dim]n/a[/dim]")
            continue
        color = score_color(value)
        table.add_row(label, f"[{color}]{value}[/{color}]")

    overall = response["overall_score"]
    color = score_color(overall)
    table.add_row("[bold]Overall[/bold]", f"[bold {color}]{overall}[/bold {color}]")
    console.print(table)
    console.print(f"Status: [{color}]{response['status']}[/{color}]  Rot score: {response['rot_score']}")

    if response["issues"]:
        console.print("\n[bold]Issues[/bold]")
        for issue in response["issues"]:
            console.print(f"  [red]•[/red] {issue}")

    if response["recommendations"]:
        console.print("\n[bold]Recommendations[/bold]")
        for rec in response["recommendations"]:
            console.print(f"  [green]→[/green] {rec}")


def _run_check(
    kind: str,
    business_name: str,
    place_id: Optional[str],
    email: Optional[str],
    notify: bool,
    output_format: str,
    config_path: Optional[str],
) -> None:
    if notify and not email:
        raise click.UsageError("--notify requires --email")

    try:
        settings = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    service = ReviewRotService(settings)
    try:
        if kind == "audit":
            outcome = service.run_audit(email or CLI_EMAIL, business_name, place_id)
        else:
            outcome = service.calculate_rot(email or CLI_EMAIL, business_name, place_id)
    except InputValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    finally:
        service.close()

    if output_format == "json":
        click.echo(json.dumps(outcome.response, indent=2, default=str))
    elif not outcome.found:
        console.print(f"[yellow]Business not found:[/yellow] {business_name}")
    elif kind == "audit":
        display_audit(outcome.response)
    else:
        display_rot(outcome.response)

    if notify and outcome.tasks:
        results = asyncio.run(run_post_response_tasks(outcome.tasks))
        for task, ok in zip(outcome.tasks, results):
            mark = "[green]✓[/green]" if ok else "[red]✗[/red]"
            console.print(f"{mark} {task.name}")

    sys.exit(0 if outcome.found else 1)


# ============================================================================
# CLI Group
# ============================================================================

@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version="1.2.0")
def cli(ctx):
    """Review freshness and profile health scoring for local businesses."""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def check_options(func):
    """Options shared by the rot and audit commands."""
    options = [
        click.argument("business_name"),
        click.option("--place-id", help="Provider place id (skips text search)"),
        click.option("--email", help="Lead email (required with --notify)"),
        click.option("--notify", is_flag=True, help="Deliver lead to store, webhook and Slack"),
        click.option("-f", "--format", "output_format",
                     type=click.Choice(["table", "json"]), default="table",
                     help="Output format"),
        click.option("--config", "config_path", type=click.Path(exists=True), help="YAML config file"),
        click.option("-q", "--quiet", is_flag=True, help="Suppress progress, only emit data"),
        click.option("-v", "--verbose", is_flag=True, help="Verbose output"),
        click.option("--debug", is_flag=True, help="Enable debug logging"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# ============================================================================
# Rot / Audit Commands
# ============================================================================

@cli.command()
@check_options
def rot(business_name, place_id, email, notify, output_format, config_path, quiet, verbose, debug):
    """Score how stale a business's reviews are."""
    setup_logging(verbose, quiet, debug)
    _run_check("rot", business_name, place_id, email, notify, output_format, config_path)


@cli.command()
@check_options
def audit(business_name, place_id, email, notify, output_format, config_path, quiet, verbose, debug):
    """Audit reviews, profile completeness, photos and responses."""
    setup_logging(verbose, quiet, debug)
    _run_check("audit", business_name, place_id, email, notify, output_format, config_path)


# ============================================================================
# Score Command
# ============================================================================

@cli.command()
@click.argument("days", type=click.IntRange(min=0))
@click.option("-f", "--format", "output_format",
              type=click.Choice(["table", "json"]), default="table")
def score(days: int, output_format: str):
    """Rot score for DAYS since the last review (no lookup)."""
    report = score_rot(days)

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    color = score_color(report.rot_score, higher_is_better=False)
    click.echo(f"{report.rot_score}")
    console.print(
        f"[{color}]{report.status.value}[/{color}] (urgency {report.urgency.value}), "
        f"{report.days_until_danger} days until danger zone"
    )


# ============================================================================
# Check Command
# ============================================================================

@cli.command()
@click.option("--config", "config_path", type=click.Path(exists=True), help="YAML config file")
def check(config_path: Optional[str]):
    """Check configuration and API availability."""
    settings = load_config(config_path)

    click.echo(f"Provider: {settings.provider}")
    if settings.provider_configured:
        click.echo(f"✓ {settings.provider}: API key configured")
    else:
        click.echo(f"✗ {settings.provider}: API key not set")

    if settings.airtable_configured:
        click.echo(f"✓ Airtable: {settings.airtable_base_id}/{settings.airtable_table_name}")
    else:
        click.echo("✗ Airtable: not configured")

    click.echo("✓ Webhook: configured" if settings.zapier_webhook_url else "✗ Webhook: not configured")

    if settings.slack_webhook_url:
        click.echo(f"✓ Slack: configured (hot lead threshold {settings.hot_lead_threshold})")
    else:
        click.echo("✗ Slack: not configured")


# ============================================================================
# Version Command
# ============================================================================

@cli.command()
def version():
    """Show version info."""
    from reviewrot import __version__
    click.echo(f"reviewrot {__version__}")


# ============================================================================
# Web Command
# ============================================================================

@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to.")
@click.option("--port", default=3001, help="Port to bind to.")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development.")
def web(host: str, port: int, reload: bool) -> None:
    """Start the HTTP API."""
    import uvicorn

    console.print(
        Panel.fit(
            f"[bold]ReviewRot API[/bold]\n"
            f"Running at: [cyan]http://{host}:{port}[/cyan]",
            border_style="blue",
        )
    )
    console.print("Press Ctrl+C to stop\n")

    uvicorn.run(
        "reviewrot.web.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


def main():
    cli()


if __name__ == "__main__":
    cli()
