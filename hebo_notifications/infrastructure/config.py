"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to the channel map and transport settings
- Falls back to defaults when the config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Channel ids default to empty; ChannelMap validation decides whether the
  loaded config is usable, not the loader
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional
import json
import logging
import os

from hebo_notifications.domain.notification_types import NotificationType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "hebo.json"


@dataclass(frozen=True)
class NotificationsConfig:
    """Channel id per notification type."""
    invalid_events_found_channel: str = ""
    event_written_channel: str = ""

    def channel_map(self) -> dict[str, str]:
        return {
            NotificationType.INVALID_EVENTS_FOUND.value: self.invalid_events_found_channel,
            NotificationType.EVENT_WRITTEN.value: self.event_written_channel,
        }


@dataclass(frozen=True)
class SnsConfig:
    """SNS client settings."""
    region: str = "us-east-1"
    endpoint_url: str = ""

    def client_kwargs(self) -> dict[str, str]:
        """Keyword arguments for boto3.client("sns", **kwargs)."""
        kwargs = {"region_name": self.region}
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        return kwargs


@dataclass(frozen=True)
class HeboConfig:
    """Root configuration."""
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    sns: SnsConfig = field(default_factory=SnsConfig)
    log_level: str = "WARNING"


def _env_override(data: dict, prefix: str = "HEBO") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern HEBO_SECTION_KEY.
    For example: HEBO_SNS_REGION=eu-west-1,
    HEBO_NOTIFICATIONS_EVENT_WRITTEN_CHANNEL=arn:aws:sns:...
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name == "log_level":
            data["log_level"] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            section_data = data.get(section)
            if not isinstance(section_data, dict):
                section_data = data[section] = {}
            section_data[field_name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must contain a JSON object", path)
        return {}
    return data


def _build_sub_config(cls, data):
    """Build a sub-config dataclass from a dict, ignoring unknown keys.

    null values fall back to the field default. Other values are kept as
    loaded; ChannelMap rejects channel ids that are not strings.
    """
    if not isinstance(data, dict):
        return cls()
    valid_fields = {f.name for f in fields(cls)}
    return cls(**{
        k: v for k, v in data.items() if k in valid_fields and v is not None
    })


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "HEBO",
) -> HeboConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (HEBO_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to hebo.json in CWD.
        env_prefix: Environment variable prefix. Defaults to HEBO.
    """
    config_path = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return HeboConfig(
        notifications=_build_sub_config(
            NotificationsConfig, data.get("notifications", {})
        ),
        sns=_build_sub_config(SnsConfig, data.get("sns", {})),
        log_level=str(data.get("log_level", "WARNING")),
    )
