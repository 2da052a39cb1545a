import pytest

from stratus.mitreattack import Tactic
from stratus.platform import Platform
from stratus.registry import AttackTechniqueFilter, Registry, get_registry
from stratus.technique import AttackTechnique


def test_registry_filtering_by_name():
    registry = Registry()
    technique = AttackTechnique(id="foo")
    registry.register_attack_technique(technique)

    assert registry.get_attack_technique_by_name(technique.id) is technique
    assert registry.get_attack_technique_by_name("nope") is None


@pytest.fixture
def populated():
    registry = Registry()
    registry.register_attack_technique(
        AttackTechnique(id="foo", platform=Platform.AWS, mitre_attack_tactics=[Tactic.PERSISTENCE])
    )
    registry.register_attack_technique(AttackTechnique(id="bar", platform=Platform.AWS))
    registry.register_attack_technique(
        AttackTechnique(id="baz", platform=Platform.KUBERNETES, mitre_attack_tactics=[Tactic.PRIVILEGE_ESCALATION])
    )
    registry.register_attack_technique(
        AttackTechnique(id="qux", platform=Platform.GCP, mitre_attack_tactics=[Tactic.DISCOVERY])
    )
    return registry


@pytest.mark.parametrize(
    "technique_filter, expected",
    [
        (AttackTechniqueFilter(platform=Platform.AWS), 2),
        (AttackTechniqueFilter(platform=Platform.KUBERNETES), 1),
        (AttackTechniqueFilter(platform=Platform.GCP), 1),
        (AttackTechniqueFilter(tactic=Tactic.PERSISTENCE), 1),
        (AttackTechniqueFilter(tactic=Tactic.EXECUTION), 0),
        (AttackTechniqueFilter(tactic=Tactic.PRIVILEGE_ESCALATION), 1),
        (AttackTechniqueFilter(tactic=Tactic.DISCOVERY), 1),
    ],
)
def test_registry_filtering(populated, technique_filter, expected):
    assert len(populated.get_attack_techniques(technique_filter)) == expected


def test_empty_filter_matches_everything(populated):
    ids = [t.id for t in populated.get_attack_techniques(AttackTechniqueFilter())]
    assert ids == ["foo", "bar", "baz", "qux"]


def test_combined_filter(populated):
    matched = populated.get_attack_techniques(
        AttackTechniqueFilter(platform=Platform.AWS, tactic=Tactic.PERSISTENCE)
    )
    assert [t.id for t in matched] == ["foo"]
    assert populated.get_attack_techniques(
        AttackTechniqueFilter(platform=Platform.GCP, tactic=Tactic.PERSISTENCE)
    ) == []


def test_filter_matches_single_technique():
    technique = AttackTechnique(id="foo", platform=Platform.AWS, mitre_attack_tactics=[Tactic.IMPACT])
    assert AttackTechniqueFilter(tactic=Tactic.IMPACT).matches(technique) is True
    assert AttackTechniqueFilter(platform=Platform.EKS).matches(technique) is False


def test_list_preserves_order_and_is_a_copy(populated):
    listed = populated.list_attack_techniques()
    assert [t.id for t in listed] == ["foo", "bar", "baz", "qux"]
    listed.clear()
    assert len(populated.list_attack_techniques()) == 4


def test_get_registry_is_shared():
    technique = AttackTechnique(id="test.shared-registry-technique")
    before = len(get_registry().list_attack_techniques())
    get_registry().register_attack_technique(technique)

    assert get_registry().get_attack_technique_by_name(technique.id) is technique
    assert len(get_registry().list_attack_techniques()) == before + 1