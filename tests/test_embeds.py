"""
Unit tests for reply embed formatting.
"""

import discord

from statusbot.betterstack.models import Heartbeat, Incident, Monitor
from statusbot.chat import embeds


def test_status_embed_up_and_down():
    monitors = [
        Monitor(id="1", name="api-server", status="up", last_checked_at="2024-01-01T00:00:00Z"),
        Monitor(id="2", name="worker", status="paused", last_checked_at="2024-01-01T00:05:00Z"),
    ]

    embed = embeds.build_status_embed(monitors)

    assert embed.title == "시스템 상태"
    assert embed.description == embeds.STATUS_DESCRIPTION
    assert embed.colour == discord.Colour(0x0099FF)
    assert embed.timestamp is not None
    assert [f.name for f in embed.fields] == ["api-server", "worker"]
    assert embed.fields[0].value == "상태: 🟢 정상\n마지막 확인: 2024-01-01T00:00:00Z"
    assert embed.fields[1].value == "상태: 🔴 다운\n마지막 확인: 2024-01-01T00:05:00Z"
    assert all(f.inline is False for f in embed.fields)


def test_empty_list_gives_embed_without_fields():
    embed = embeds.build_heartbeats_embed([])

    assert embed.title == "최근 하트비트"
    assert len(embed.fields) == 0


def test_incident_resolution_text():
    incidents = [
        Incident(id="7", name="db down", status="Resolved",
                 started_at="2024-01-01T00:00:00Z", resolved_at="2024-01-01T01:00:00Z"),
        Incident(id="8", name="api slow", status="Started",
                 started_at="2024-01-02T00:00:00Z", resolved_at=None),
    ]

    embed = embeds.build_incidents_embed(incidents)

    assert embed.colour == discord.Colour(0xFF0000)
    assert embed.fields[0].name == "인시던트 #7"
    assert "해결 시간: 2024-01-01T01:00:00Z" in embed.fields[0].value
    assert embeds.UNRESOLVED not in embed.fields[0].value
    assert embed.fields[1].value == (
        "이름: api slow\n상태: Started\n시작 시간: 2024-01-02T00:00:00Z\n아직 해결되지 않음"
    )


def test_heartbeat_fields():
    embed = embeds.build_heartbeats_embed([Heartbeat(id="10", name="backup", period=86400, status="down")])

    assert embed.colour == discord.Colour(0x8A2BE2)
    assert embed.fields[0].name == "하트비트 #10"
    assert embed.fields[0].value == "이름: backup\n상태: down\n주기: 86400"


def test_field_count_is_capped():
    monitors = [
        Monitor(id=str(i), name=f"svc-{i}", status="up", last_checked_at="2024-01-01T00:00:00Z")
        for i in range(30)
    ]

    embed = embeds.build_status_embed(monitors)

    assert len(embed.fields) == embeds.MAX_FIELDS
    assert embed.fields[-1].name == "svc-24"


def test_long_field_name_is_truncated():
    embed = embeds.build_status_embed([
        Monitor(id="1", name="x" * 300, status="up", last_checked_at="2024-01-01T00:00:00Z")
    ])

    assert len(embed.fields[0].name) == embeds.MAX_FIELD_NAME
    assert embed.fields[0].name.endswith("…")


def test_missing_monitor_name_still_renders():
    embed = embeds.build_status_embed([Monitor(id="1", name=None, status="up", last_checked_at=None)])

    assert embed.fields[0].name == "-"


def test_embed_total_stays_within_discord_limit():
    monitors = [
        Monitor(id=str(i), name="m" * 250, status="up", last_checked_at="2024-01-01T00:00:00Z")
        for i in range(25)
    ]

    embed = embeds.build_status_embed(monitors)

    assert len(embed) <= embeds.MAX_EMBED_TOTAL
    assert 0 < len(embed.fields) < 25
    assert embed.fields[0].name == "m" * 250


def test_non_string_values_are_rendered_as_text():
    embed = embeds.build_status_embed([Monitor(id="1", name=12345, status="up", last_checked_at=None)])

    assert embed.fields[0].name == "12345"
