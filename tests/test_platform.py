import pytest

from stratus.platform import Platform, platform_from_string


@pytest.mark.parametrize("platform", list(Platform))
def test_round_trip_through_value(platform):
    assert platform_from_string(platform.value) is platform


@pytest.mark.parametrize("platform", list(Platform))
def test_parsing_ignores_case(platform):
    assert platform_from_string(platform.value.upper()) is platform
    assert platform_from_string(platform.value.lower()) is platform


def test_unknown_platform_raises():
    with pytest.raises(ValueError, match="unknown platform: openstack"):
        platform_from_string("openstack")


def test_format_name_values():
    assert Platform.AWS.format_name() == "AWS"
    assert Platform.AZURE.format_name() == "Azure"
    assert Platform.ENTRA_ID.format_name() == "Entra ID"
    assert Platform.KUBERNETES.format_name() == "Kubernetes"
    assert Platform.GCP.format_name() == "GCP"
    assert Platform.EKS.format_name() == "EKS"


@pytest.mark.parametrize("platform", list(Platform))
def test_formatted_name_parses_back(platform):
    # Formatted names differ only by case from identifiers, except Entra ID.
    if platform is Platform.ENTRA_ID:
        with pytest.raises(ValueError):
            platform_from_string(platform.format_name())
    else:
        assert platform_from_string(platform.format_name()) is platform


def test_parsed_platform_str_is_identifier():
    assert str(platform_from_string("Kubernetes")) == "kubernetes"
    assert str(platform_from_string("ENTRA-ID")) == "entra-id"