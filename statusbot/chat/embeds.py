"""
Discord embed builders for command replies.

User-facing text is Korean. Each builder returns a discord.Embed with a fixed
title, description and colour, the current timestamp, and one non-inline
field per item in fetch order.
"""

from typing import Iterable

import discord

from ..betterstack.models import Heartbeat, Incident, Monitor


# Discord rejects embeds beyond these limits
MAX_FIELDS = 25
MAX_FIELD_NAME = 256
MAX_FIELD_VALUE = 1024
MAX_EMBED_TOTAL = 6000

STATUS_TITLE = "시스템 상태"
STATUS_DESCRIPTION = "현재 모니터링 중인 서비스들의 상태입니다."
STATUS_COLOR = discord.Colour(0x0099FF)
STATUS_UP = "🟢 정상"
STATUS_DOWN = "🔴 다운"

INCIDENTS_TITLE = "최근 인시던트"
INCIDENTS_DESCRIPTION = "발생한 최근 인시던트 목록입니다."
INCIDENTS_COLOR = discord.Colour(0xFF0000)
UNRESOLVED = "아직 해결되지 않음"

HEARTBEATS_TITLE = "최근 하트비트"
HEARTBEATS_DESCRIPTION = "현재 하트비트 상태 목록입니다."
HEARTBEATS_COLOR = discord.Colour(0x8A2BE2)

STATUS_ERROR = "상태 확인 중 오류가 발생했습니다."
INCIDENTS_ERROR = "인시던트 확인 중 오류가 발생했습니다."
HEARTBEATS_ERROR = "하트비트 확인 중 오류가 발생했습니다."


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[: limit - 1] + "…"


def _new_embed(title: str, description: str, colour: discord.Colour) -> discord.Embed:
    return discord.Embed(
        title=title,
        description=description,
        colour=colour,
        timestamp=discord.utils.utcnow(),
    )


def _as_text(value) -> str:
    if value is None or value == "":
        return "-"
    return str(value)


def _add_fields(embed: discord.Embed, fields: Iterable[tuple[object, object]]) -> discord.Embed:
    for index, (name, value) in enumerate(fields):
        if index >= MAX_FIELDS:
            break

        name = _truncate(_as_text(name), MAX_FIELD_NAME)
        value = _truncate(_as_text(value), MAX_FIELD_VALUE)
        # Remaining items are dropped once the whole embed would pass the total limit
        if len(embed) + len(name) + len(value) > MAX_EMBED_TOTAL:
            break

        embed.add_field(name=name, value=value, inline=False)
    return embed


def format_monitor_status(monitor: Monitor) -> str:
    label = STATUS_UP if monitor.is_up else STATUS_DOWN
    return f"상태: {label}\n마지막 확인: {monitor.last_checked_at}"


def format_incident(incident: Incident) -> str:
    resolution = f"해결 시간: {incident.resolved_at}" if incident.is_resolved else UNRESOLVED
    return (
        f"이름: {incident.name}\n"
        f"상태: {incident.status}\n"
        f"시작 시간: {incident.started_at}\n"
        f"{resolution}"
    )


def format_heartbeat(heartbeat: Heartbeat) -> str:
    return f"이름: {heartbeat.name}\n상태: {heartbeat.status}\n주기: {heartbeat.period}"


def build_status_embed(monitors: Iterable[Monitor]) -> discord.Embed:
    """Embed for !status: every monitor on the page."""
    embed = _new_embed(STATUS_TITLE, STATUS_DESCRIPTION, STATUS_COLOR)
    return _add_fields(embed, ((m.name, format_monitor_status(m)) for m in monitors))


def build_incidents_embed(incidents: Iterable[Incident]) -> discord.Embed:
    """Embed for !incidents. Callers cap the list."""
    embed = _new_embed(INCIDENTS_TITLE, INCIDENTS_DESCRIPTION, INCIDENTS_COLOR)
    return _add_fields(embed, ((f"인시던트 #{i.id}", format_incident(i)) for i in incidents))


def build_heartbeats_embed(heartbeats: Iterable[Heartbeat]) -> discord.Embed:
    """Embed for !heartbeats. Callers cap the list."""
    embed = _new_embed(HEARTBEATS_TITLE, HEARTBEATS_DESCRIPTION, HEARTBEATS_COLOR)
    return _add_fields(embed, ((f"하트비트 #{h.id}", format_heartbeat(h)) for h in heartbeats))
