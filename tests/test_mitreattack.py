import pytest

from stratus.mitreattack import (
    Tactic,
    attack_tactic_from_string,
    attack_tactic_to_string,
    get_all_mitre_attack_tactics,
)


def test_from_string_exact_name():
    assert attack_tactic_from_string("Persistence") == Tactic.PERSISTENCE


def test_from_string_ignores_case():
    assert attack_tactic_from_string("privilege escalation") == Tactic.PRIVILEGE_ESCALATION
    assert attack_tactic_from_string("INITIAL ACCESS") == Tactic.INITIAL_ACCESS


def test_from_string_unknown_name_maps_to_unspecified():
    assert attack_tactic_from_string("Unknown") == Tactic.UNSPECIFIED


def test_from_string_rejects_unknown_tactic():
    with pytest.raises(ValueError, match="unknown MITRE ATT&CK tactic: Reconnaissance"):
        attack_tactic_from_string("Reconnaissance")


def test_to_string_pins_display_names():
    assert attack_tactic_to_string(Tactic.INITIAL_ACCESS) == "Initial Access"
    assert attack_tactic_to_string(Tactic.DEFENSE_EVASION) == "Defense Evasion"
    assert attack_tactic_to_string(Tactic.IMPACT) == "Impact"


@pytest.mark.parametrize("tactic", list(Tactic))
def test_round_trip(tactic):
    assert attack_tactic_from_string(attack_tactic_to_string(tactic)) == tactic


def test_str_matches_display_name():
    assert str(Tactic.LATERAL_MOVEMENT) == attack_tactic_to_string(Tactic.LATERAL_MOVEMENT)


def test_all_tactics_in_order():
    tactics = get_all_mitre_attack_tactics()
    assert tactics[0] == Tactic.UNSPECIFIED
    assert tactics == sorted(tactics)
    assert set(tactics) == set(Tactic)
    assert len(tactics) == len(Tactic)