"""Pytest configuration for all tests."""

import pytest

from safetyconfig.core.config import get_settings
from safetyconfig.core.logging import clear_context
from safetyconfig.domain.entities import (
    SafetySource,
    SafetySourceProfile,
    SafetySourcesGroupBuilder,
    SafetySourceType,
)


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Clear cached settings and bound logging context around each test."""
    get_settings.cache_clear()
    clear_context()
    yield
    get_settings.cache_clear()
    clear_context()


def make_static_source(source_id: str = "static_source") -> SafetySource:
    """Build a valid static safety source."""
    return (
        SafetySource.builder()
        .set_type(SafetySourceType.STATIC)
        .set_id(source_id)
        .set_title_res_id(201)
        .set_summary_res_id(202)
        .set_intent_action("android.settings.SECURITY_SETTINGS")
        .set_profile(SafetySourceProfile.PRIMARY)
        .build()
    )


def make_dynamic_source(source_id: str = "dynamic_source") -> SafetySource:
    """Build a valid dynamic safety source."""
    return (
        SafetySource.builder()
        .set_type(SafetySourceType.DYNAMIC)
        .set_id(source_id)
        .set_package_name("com.example.security")
        .set_title_res_id(301)
        .set_intent_action("com.example.security.OPEN")
        .set_profile(SafetySourceProfile.ALL)
        .build()
    )


@pytest.fixture
def static_source() -> SafetySource:
    return make_static_source()


@pytest.fixture
def source_factory():
    """Return a callable building a valid static source with the given id."""
    return make_static_source


@pytest.fixture
def dynamic_source() -> SafetySource:
    return make_dynamic_source()


@pytest.fixture
def group_builder(static_source) -> SafetySourcesGroupBuilder:
    """A group builder with every required attribute set."""
    return (
        SafetySourcesGroupBuilder()
        .set_id("privacy")
        .set_title_res_id(101)
        .set_summary_res_id(102)
        .add_safety_source(static_source)
    )
