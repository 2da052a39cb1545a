"""MITRE ATT&CK tactics known to the attack technique catalogue."""

from __future__ import annotations

from enum import IntEnum

_TACTIC_NAMES: tuple[str, ...] = (
    "Unknown",
    "Initial Access",
    "Execution",
    "Persistence",
    "Privilege Escalation",
    "Defense Evasion",
    "Credential Access",
    "Discovery",
    "Lateral Movement",
    "Collection",
    "Exfiltration",
    "Impact",
)


class Tactic(IntEnum):
    """A MITRE ATT&CK tactic; UNSPECIFIED stands for no tactic."""

    UNSPECIFIED = 0
    INITIAL_ACCESS = 1
    EXECUTION = 2
    PERSISTENCE = 3
    PRIVILEGE_ESCALATION = 4
    DEFENSE_EVASION = 5
    CREDENTIAL_ACCESS = 6
    DISCOVERY = 7
    LATERAL_MOVEMENT = 8
    COLLECTION = 9
    EXFILTRATION = 10
    IMPACT = 11

    def __str__(self) -> str:
        return _TACTIC_NAMES[self.value]


def attack_tactic_from_string(name: str) -> Tactic:
    """Parse a tactic from its display name, ignoring case."""
    lower_name = name.lower()
    for value, tactic_name in enumerate(_TACTIC_NAMES):
        if tactic_name.lower() == lower_name:
            return Tactic(value)
    raise ValueError("unknown MITRE ATT&CK tactic: " + name)


def attack_tactic_to_string(tactic: Tactic) -> str:
    """Return the display name of a tactic."""
    return _TACTIC_NAMES[Tactic(tactic).value]


def get_all_mitre_attack_tactics() -> list[Tactic]:
    """Return every tactic, in catalogue order, starting with UNSPECIFIED."""
    return list(Tactic)