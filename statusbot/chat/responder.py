"""
Command Responder

Turns an inbound chat message into at most one reply: recognise the command,
fetch the matching Better Stack data, and answer with an embed (or a fixed
apology if the fetch fails).
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Optional, Protocol

import discord

from ..betterstack.client import BetterStackClient
from ..core.config import AppConfig
from ..core.exceptions import StatusBotException
from . import embeds
from .command_parser import CommandType, parse_command


logger = logging.getLogger(__name__)


class IncomingMessage(Protocol):
    """What the responder needs from a chat message."""

    content: str
    author_is_bot: bool

    async def reply(self, content: Optional[str] = None, *, embed: Optional[discord.Embed] = None):
        ...


Handler = Callable[[IncomingMessage], Awaitable[None]]


class CommandResponder:
    """
    Dispatches chat commands to handlers.

    Each handler makes one Better Stack call in a worker thread, so a slow API
    only suspends the command that is waiting on it. Handlers share nothing
    but the read-only client and config.

    Usage:
        responder = CommandResponder(client, config.app)
        handled = await responder.handle_message(message)
    """

    def __init__(self, client: BetterStackClient, app_config: AppConfig):
        """
        Initialize responder.

        Args:
            client: Shared BetterStackClient
            app_config: Runtime settings (reply sizes)
        """
        self.client = client
        self.app_config = app_config
        self.handlers: Dict[CommandType, Handler] = {
            CommandType.STATUS: self.handle_status,
            CommandType.INCIDENTS: self.handle_incidents,
            CommandType.HEARTBEATS: self.handle_heartbeats,
        }

    async def handle_message(self, message: IncomingMessage) -> bool:
        """
        Handle one inbound message.

        Returns:
            True if a command ran (and a reply was sent), False if ignored
        """
        if message.author_is_bot:
            return False

        command = parse_command(message.content)
        if command is None:
            return False

        logger.info(f"Handling {command.value}")
        await self.handlers[command](message)
        return True

    async def _respond(
        self,
        message: IncomingMessage,
        name: str,
        build: Callable[[], discord.Embed],
        apology: str,
    ):
        """Run fetch+format in a thread and send exactly one reply."""
        try:
            embed = await asyncio.to_thread(build)
        except StatusBotException as e:
            logger.error(f"Error fetching {name}: {e}", exc_info=True)
            await message.reply(apology)
            return
        except Exception:
            logger.exception(f"Unexpected error building {name} reply")
            await message.reply(apology)
            return

        try:
            await message.reply(embed=embed)
        except discord.HTTPException as e:
            # Embed was not delivered; the apology is still the only reply
            logger.error(f"Discord rejected {name} embed: {e}", exc_info=True)
            await message.reply(apology)

    async def handle_status(self, message: IncomingMessage):
        def build():
            page = self.client.list_monitors()
            return embeds.build_status_embed(page.first())

        await self._respond(message, "monitors", build, embeds.STATUS_ERROR)

    async def handle_incidents(self, message: IncomingMessage):
        def build():
            page = self.client.list_incidents()
            return embeds.build_incidents_embed(page.first(self.app_config.incident_limit))

        await self._respond(message, "incidents", build, embeds.INCIDENTS_ERROR)

    async def handle_heartbeats(self, message: IncomingMessage):
        def build():
            page = self.client.list_heartbeats()
            return embeds.build_heartbeats_embed(page.first(self.app_config.heartbeat_limit))

        await self._respond(message, "heartbeats", build, embeds.HEARTBEATS_ERROR)
