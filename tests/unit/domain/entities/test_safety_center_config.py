"""Unit tests for the SafetyCenterConfig entity and its builder."""

import pytest

from safetyconfig.domain.entities import (
    SafetyCenterConfig,
    SafetyCenterConfigBuilder,
    SafetySourcesGroup,
    SafetySourcesGroupBuilder,
)
from safetyconfig.domain.exceptions import IllegalStateError, InvalidArgumentError


def make_group(group_id: str, *sources) -> SafetySourcesGroup:
    builder = SafetySourcesGroupBuilder().set_id(group_id).set_title_res_id(1).set_summary_res_id(2)
    for source in sources:
        builder.add_safety_source(source)
    return builder.build()


def test_build_config(source_factory, dynamic_source):
    privacy = make_group("privacy", source_factory("camera"), source_factory("mic"))
    security = make_group("security", dynamic_source)

    config = (
        SafetyCenterConfig.builder()
        .add_safety_sources_group(privacy)
        .add_safety_sources_group(security)
        .build()
    )

    assert config.safety_sources_groups == (privacy, security)
    assert [source.id for source in config.safety_sources()] == [
        "camera",
        "mic",
        "dynamic_source",
    ]
    assert config.get_group("security") is security
    assert config.get_group("missing") is None


def test_empty_config():
    with pytest.raises(IllegalStateError, match="Safety sources groups empty"):
        SafetyCenterConfigBuilder().build()


def test_add_none_group():
    with pytest.raises(InvalidArgumentError):
        SafetyCenterConfigBuilder().add_safety_sources_group(None)


def test_duplicate_group_id(source_factory):
    builder = (
        SafetyCenterConfigBuilder()
        .add_safety_sources_group(make_group("privacy", source_factory("a")))
        .add_safety_sources_group(make_group("privacy", source_factory("b")))
    )
    with pytest.raises(IllegalStateError, match="Duplicate id privacy"):
        builder.build()


def test_duplicate_source_id_across_groups(source_factory):
    builder = (
        SafetyCenterConfigBuilder()
        .add_safety_sources_group(make_group("privacy", source_factory("shared")))
        .add_safety_sources_group(make_group("security", source_factory("shared")))
    )
    with pytest.raises(IllegalStateError, match="Duplicate id shared among safety sources"):
        builder.build()


def test_opaque_members_skip_id_check():
    config = (
        SafetyCenterConfigBuilder()
        .add_safety_sources_group(make_group("first", "member"))
        .add_safety_sources_group(make_group("second", "member"))
        .build()
    )
    assert config.safety_sources() == ["member", "member"]


def test_configs_compare_by_value(source_factory):
    def build():
        return (
            SafetyCenterConfigBuilder()
            .add_safety_sources_group(make_group("privacy", source_factory("a")))
            .build()
        )

    assert build() == build()
    assert hash(build()) == hash(build())


def test_constructor_copies_group_list(source_factory):
    groups = [make_group("privacy", source_factory("a"))]
    config = SafetyCenterConfig(safety_sources_groups=groups)
    groups.append(make_group("security", source_factory("b")))

    assert isinstance(config.safety_sources_groups, tuple)
    assert [group.id for group in config.safety_sources_groups] == ["privacy"]
