"""Helpers for the per-technique documentation pages."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .platform import Platform

logger = logging.getLogger(__name__)

_AWS_SOURCE_SUFFIX = ".amazonaws.com"


@dataclass
class DetonationLogs:
    """Logs recorded while detonating a technique, prepared for display."""

    event_names: list[str] = field(default_factory=list)
    raw_logs: str = ""
    event_name_lines: list[int] = field(default_factory=list)


def _event_name(event: dict) -> str:
    try:
        source = event["eventSource"]
        name = event["eventName"]
    except KeyError as err:
        raise ValueError(f"detonation log event without {err.args[0]}") from err
    if source.endswith(_AWS_SOURCE_SUFFIX):
        source = source[: -len(_AWS_SOURCE_SUFFIX)]
    return f"{source}:{name}"


def find_detonation_logs(
    technique_id: str, logs_directory: Union[str, Path]
) -> Optional[DetonationLogs]:
    """Load the detonation logs of a technique, or None when there are none.

    Logs that are not a JSON list of events are reported and skipped.
    """
    path = Path(logs_directory) / f"{technique_id}.json"
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None

    try:
        events = json.loads(data)
    except json.JSONDecodeError as err:
        logger.warning("unable to parse JSON detonation logs for technique %s: %s", technique_id, err)
        return None
    if not isinstance(events, list) or not all(isinstance(e, dict) for e in events):
        logger.warning(
            "unable to parse JSON detonation logs for technique %s: not a list of events",
            technique_id,
        )
        return None

    event_names = sorted({_event_name(event) for event in events})
    raw_logs = data.replace("\n", "\n\t")
    event_name_lines = [
        line_number
        for line_number, line in enumerate(raw_logs.split("\n"), start=1)
        if '"eventName":' in line
    ]
    return DetonationLogs(event_names=event_names, raw_logs=raw_logs, event_name_lines=event_name_lines)


def format_technique_description(description: str) -> str:
    """Render the Warm-up and Detonation labels in small capitals."""
    description = description.replace(
        "Warm-up:", '<span style="font-variant: small-caps;">Warm-up</span>:'
    )
    return description.replace(
        "Detonation:", '<span style="font-variant: small-caps;">Detonation</span>:'
    )


def format_platform_name(platform: Union[Platform, str]) -> str:
    """Return the display name of a platform; raise ValueError if unknown."""
    try:
        return Platform(platform).format_name()
    except ValueError:
        raise ValueError("unknown platform " + str(platform)) from None