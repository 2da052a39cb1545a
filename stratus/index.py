"""Index of attack techniques by platform and tactic, and its YAML export."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Union

import yaml

from .mitreattack import attack_tactic_to_string
from .platform import Platform
from .technique import AttackTechnique

TechniqueIndex = dict[Platform, dict[str, list[AttackTechnique]]]


def build_index(techniques: Iterable[AttackTechnique]) -> TechniqueIndex:
    """Group techniques by platform, then by tactic display name.

    A technique appears once under each of its tactics, in the order given.
    """
    index: TechniqueIndex = {}
    for technique in techniques:
        for tactic in technique.mitre_attack_tactics:
            tactic_name = attack_tactic_to_string(tactic)
            by_tactic = index.setdefault(technique.platform, {})
            by_tactic.setdefault(tactic_name, []).append(technique)
    return index


def _index_to_plain(
    index: Mapping[Platform, Mapping[str, Iterable[AttackTechnique]]],
) -> dict[str, Any]:
    plain: dict[str, Any] = {}
    for platform in sorted(index, key=lambda p: p.format_name()):
        tactics = index[platform]
        plain[platform.format_name()] = {
            tactic: [technique.to_yaml_dict() for technique in tactics[tactic]]
            for tactic in sorted(tactics)
        }
    return plain


def generate_yaml(
    path: Union[str, Path],
    index: Mapping[Platform, Mapping[str, Iterable[AttackTechnique]]],
) -> None:
    """Write the index to a YAML file, replacing any existing content."""
    with open(path, "w", encoding="utf-8") as stream:
        yaml.safe_dump(
            _index_to_plain(index),
            stream,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )