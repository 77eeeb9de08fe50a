"""
Better Stack Status Bot - CLI Entry Point

Running `statusbot` with no subcommand starts the Discord bot and keeps it
running until the process is stopped.
"""

import sys

import click

from statusbot.betterstack.client import BetterStackClient
from statusbot.chat.bot import StatusBot
from statusbot.chat.responder import CommandResponder
from statusbot.core.config import get_config
from statusbot.core.exceptions import StatusBotException
from statusbot.core.logging_config import setup_logging


def _load_valid_config():
    """Load configuration, exiting with status 1 if it is incomplete."""
    config = get_config()
    errors = config.validate()
    if errors:
        click.echo("❌ Configuration has errors:", err=True)
        for error in errors:
            click.echo(f"   • {error}", err=True)
        sys.exit(1)
    return config


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--log-file", type=str, help="Log file path (overrides LOG_FILE)")
@click.pass_context
def cli(ctx, verbose, log_file):
    """Better Stack status bot for Discord.

    Answers !status, !incidents and !heartbeats with data from Better Stack Uptime.
    """
    config = get_config()
    log_level = "DEBUG" if verbose else config.log_level
    setup_logging(log_level=log_level, log_file=log_file or config.log_file)

    if ctx.invoked_subcommand is None:
        run_bot()


def run_bot():
    """Build the shared API client and run the Discord bot until stopped."""
    config = _load_valid_config()

    client = BetterStackClient(config.better_stack)
    bot = StatusBot(CommandResponder(client, config.app))

    click.echo("🚀 Starting Better Stack status bot")
    try:
        # discord.py handles login, reconnects and Ctrl+C
        bot.run(config.discord.token, log_handler=None)
    finally:
        client.close()


@cli.command()
def check():
    """Validate configuration and test the Better Stack API token.

    Does not connect to Discord.

    Example:
        statusbot check
    """
    config = _load_valid_config()

    click.echo("\n📡 Better Stack Uptime API...")
    client = BetterStackClient(config.better_stack)
    try:
        count = client.test_connection()
    except StatusBotException as e:
        click.echo(f"   ❌ Better Stack API: Failed ({e})")
        sys.exit(1)
    finally:
        client.close()

    click.echo(f"   ✅ Better Stack API: Connected ({count} monitors)")


# ============================================================================
# ENTRY POINT
# ============================================================================


if __name__ == "__main__":
    cli(obj={})
