# src/extel/telemetry/logger/processors.py

"""
Custom structlog processors used by extel's logging pipeline.
"""

import logging

from structlog.typing import EventDict, WrappedLogger

LEVEL_EMOJIS = {
    "debug": "🐛",
    "info": "ℹ️",
    "warning": "⚠️",
    "error": "❌",
    "critical": "💥",
}


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefix the event with an emoji matching its level."""
    level = event_dict.get("level", method_name)
    emoji = LEVEL_EMOJIS.get(str(level).lower())
    if emoji and isinstance(event_dict.get("event"), str):
        event_dict["event"] = f"{emoji} {event_dict['event']}"
    return event_dict


def remove_extra_keys_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drop keys bound with a None value, e.g. an unset working directory."""
    for key in [k for k, v in event_dict.items() if v is None]:
        del event_dict[key]
    return event_dict


def level_number(name: str) -> int:
    """Map a level name to its numeric value, falling back to INFO."""
    numeric = logging.getLevelName(name.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
