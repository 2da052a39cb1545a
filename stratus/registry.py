"""Registry of the attack techniques available to the tool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .mitreattack import Tactic
from .platform import Platform
from .technique import AttackTechnique


@dataclass
class AttackTechniqueFilter:
    """Selects techniques by platform and tactic; unset fields match anything."""

    platform: Optional[Platform] = None
    tactic: Tactic = Tactic.UNSPECIFIED

    def matches(self, technique: AttackTechnique) -> bool:
        """Tell whether a technique passes this filter."""
        platform_matches = self.platform is None or technique.platform == self.platform
        tactic_matches = (
            self.tactic == Tactic.UNSPECIFIED
            or self.tactic in technique.mitre_attack_tactics
        )
        return platform_matches and tactic_matches


class Registry:
    """An ordered collection of attack techniques."""

    def __init__(self) -> None:
        self._techniques: list[AttackTechnique] = []

    def register_attack_technique(self, technique: AttackTechnique) -> None:
        """Add a technique to the registry."""
        self._techniques.append(technique)

    def get_attack_technique_by_name(self, name: str) -> Optional[AttackTechnique]:
        """Return the first technique with this ID, or None."""
        return next((t for t in self._techniques if t.id == name), None)

    def get_attack_techniques(self, technique_filter: AttackTechniqueFilter) -> list[AttackTechnique]:
        """Return the techniques that pass the filter, in registration order."""
        return [t for t in self._techniques if technique_filter.matches(t)]

    def list_attack_techniques(self) -> list[AttackTechnique]:
        """Return all registered techniques, in registration order."""
        return list(self._techniques)


_registry = Registry()


def get_registry() -> Registry:
    """Return the process-wide registry."""
    return _registry