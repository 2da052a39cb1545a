"""Attack techniques and their lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from .mitreattack import Tactic, attack_tactic_to_string
from .platform import Platform

DetonationFunction = Callable[[dict, Any], None]


class AttackTechniqueState(str, Enum):
    """Lifecycle state of an attack technique."""

    COLD = "COLD"
    WARM = "WARM"
    DETONATED = "DETONATED"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class AttackTechnique:
    """An attack technique: its metadata and its detonate/revert actions.

    ``detonate`` and ``revert`` receive the prerequisite outputs and a
    provider factory, and raise on failure.
    """

    id: str
    friendly_name: str = ""
    description: str = ""
    detection: str = ""
    is_slow: bool = False
    mitre_attack_tactics: list[Tactic] = field(default_factory=list)
    platform: Optional[Platform] = None
    prerequisites_terraform_code: Optional[bytes] = None
    detonate: Optional[DetonationFunction] = None
    is_idempotent: bool = False
    revert: Optional[DetonationFunction] = None

    def __str__(self) -> str:
        return self.id

    def to_yaml_dict(self) -> dict[str, Any]:
        """Return the fields exported to YAML, with display names for enums."""
        if self.platform is None:
            raise ValueError("platform name not formatted")
        return {
            "id": self.id,
            "name": self.friendly_name,
            "isSlow": self.is_slow,
            "mitreAttackTactics": [
                attack_tactic_to_string(tactic) for tactic in self.mitre_attack_tactics
            ],
            "platform": self.platform.format_name(),
            "isIdempotent": self.is_idempotent,
        }