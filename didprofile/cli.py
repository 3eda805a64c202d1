"""Command-line interface for didprofile."""

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from didprofile import ProfileService, save_json, to_json, __version__
from didprofile.config import LogFormat, ServiceConfig, load_settings
from didprofile.exceptions import ConfigError, OrchestrationError
from didprofile.logging import configure_logging
from didprofile.secrets import AWSSecretsManagerResolver, EnvSecretResolver

app = typer.Typer(
    name="didprofile",
    help="AT Protocol profile lookup by DID",
    add_completion=False,
)
console = Console()


class SecretSource(str, Enum):
    """Where the utility-account secret is read from."""
    AWS = "aws"
    ENV = "env"


def version_callback(value: bool):
    if value:
        console.print(f"didprofile version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """didprofile - AT Protocol profile lookup by DID."""
    pass


@app.command()
def get(
    did: str = typer.Argument(..., help="DID to look up"),
    secrets: SecretSource = typer.Option(
        SecretSource.AWS, "--secrets", "-s", help="Secret store for the utility account"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the profile JSON to this file"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print raw profile JSON instead of a table"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", help="Show console logs"
    ),
):
    """Fetch the public profile for a DID."""
    config = _settings(
        log_format=LogFormat.CONSOLE,
        log_level="DEBUG" if verbose else "ERROR",
    )
    configure_logging(config)

    if secrets == SecretSource.ENV:
        resolver = EnvSecretResolver()
    else:
        resolver = AWSSecretsManagerResolver(region=config.aws_region)

    service = ProfileService(resolver)
    try:
        profile = service.get_profile_for_did(did)
    except OrchestrationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(to_json(profile))
    else:
        _print_profile_table(profile)

    if output:
        save_json(profile, output)
        console.print(f"[dim]Saved to {output}[/dim]")


@app.command("config")
def show_config():
    """Show the configuration resolved from the environment."""
    config = _settings()

    table = Table(title="didprofile configuration", show_header=False)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("ATPROTO_BASE_URL", config.atproto_base_url or "[red]unset[/red]")
    table.add_row("PDS_UTIL_ACCOUNT_CREDS", config.util_account_secret_name or "[red]unset[/red]")
    table.add_row("AWS_REGION", config.aws_region)
    table.add_row("Log level", config.log_level)
    table.add_row("Log format", config.log_format.value)

    console.print(table)


def _settings(**overrides) -> ServiceConfig:
    """Load settings or exit with the offending field names."""
    try:
        return load_settings(**overrides)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)


def _print_profile_table(profile):
    """Print profile as table."""
    table = Table(title=f"@{profile.handle}", show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("DID", profile.did)
    table.add_row("Display Name", profile.display_name or "-")
    table.add_row("Description", profile.description or "-")
    table.add_row("Followers", _count(profile.followers_count))
    table.add_row("Follows", _count(profile.follows_count))
    table.add_row("Posts", _count(profile.posts_count))
    table.add_row("Created", profile.created_at or "-")
    if profile.labels:
        table.add_row("Labels", ", ".join(label.value or "?" for label in profile.labels))

    console.print(table)


def _count(value: int | None) -> str:
    return f"{value:,}" if value is not None else "-"


if __name__ == "__main__":
    app()
