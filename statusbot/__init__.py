"""
Better Stack Status Bot

Relays Better Stack Uptime monitor, incident and heartbeat status into
Discord channels on command.
"""

__version__ = "0.1.0"
