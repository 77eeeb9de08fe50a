"""
Better Stack Uptime API integration.
"""

from .client import BetterStackClient
from .models import Heartbeat, Incident, Monitor, Page

__all__ = ["BetterStackClient", "Heartbeat", "Incident", "Monitor", "Page"]
