"""
Discord bot

Connects to Discord and hands every inbound message to the CommandResponder.
Login, reconnection and rate limiting are left to discord.py.
"""

import logging
from typing import Optional

import discord

from .responder import CommandResponder


logger = logging.getLogger(__name__)


class DiscordMessage:
    """Adapts discord.Message to the responder's IncomingMessage interface."""

    def __init__(self, message: discord.Message):
        self._message = message

    @property
    def content(self) -> str:
        return self._message.content

    @property
    def author_is_bot(self) -> bool:
        return self._message.author.bot

    async def reply(self, content: Optional[str] = None, *, embed: Optional[discord.Embed] = None):
        if embed is not None:
            return await self._message.reply(content, embed=embed)
        return await self._message.reply(content)


def default_intents() -> discord.Intents:
    """Gateway intents needed to read commands in servers and DMs."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.dm_messages = True
    intents.message_content = True
    return intents


class StatusBot(discord.Client):
    """
    Discord client that answers Better Stack status commands.

    Usage:
        bot = StatusBot(CommandResponder(client, config.app))
        bot.run(config.discord.token)
    """

    def __init__(self, responder: CommandResponder, intents: Optional[discord.Intents] = None):
        super().__init__(intents=intents or default_intents())
        self.responder = responder

    async def on_ready(self):
        logger.info(f"Logged in as {self.user}")

    async def on_message(self, message: discord.Message):
        await self.responder.handle_message(DiscordMessage(message))
