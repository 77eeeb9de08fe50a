"""
Chat Integration Module

Provides Discord command parsing and replies for the Better Stack status bot.
"""

from .command_parser import CommandType, parse_command
from .responder import CommandResponder, IncomingMessage
from .bot import DiscordMessage, StatusBot

__all__ = [
    "CommandType",
    "parse_command",
    "CommandResponder",
    "IncomingMessage",
    "DiscordMessage",
    "StatusBot",
]
