"""
Chat Command Parser

Detects status bot commands in Discord messages. A command is the first
whitespace-delimited token of the message, compared case-insensitively.
"""

import logging
from enum import Enum
from typing import Optional


logger = logging.getLogger(__name__)


class CommandType(Enum):
    """Supported command keywords."""
    STATUS = "!status"  # Monitor up/down summary
    INCIDENTS = "!incidents"  # Most recent incidents
    HEARTBEATS = "!heartbeats"  # Heartbeat check-in status


_KEYWORDS = {command.value: command for command in CommandType}


def parse_command(message_text: Optional[str]) -> Optional[CommandType]:
    """
    Parse chat message for a bot command.

    Args:
        message_text: Raw message text

    Returns:
        CommandType if the first token is a known keyword, None otherwise
    """
    tokens = (message_text or "").split()
    if not tokens:
        return None

    command = _KEYWORDS.get(tokens[0].lower())
    if command:
        logger.debug(f"Parsed command: {command.value}")
    return command
