"""
Tests for app settings, context and the requirements check.
"""
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from tones import __version__
from tones.checks import check_requirements, meets_requirements
from tones.conf import get_context, load_settings


def test_context_settings_fields():
    settings = get_context().settings

    assert settings.version == __version__
    assert settings.basename == "tones"
    assert settings.url == "https://cdn.example.com/tones/"
    assert settings.path.endswith("tones/")


def test_settings_are_read_only():
    with pytest.raises(FrozenInstanceError):
        get_context().settings.url = "https://elsewhere/"


def test_unknown_field_raises():
    with pytest.raises(AttributeError, match="_token"):
        get_context().settings._token


@override_settings(TONES={"URL": "https://cdn.example.com/no-slash"})
def test_url_gets_trailing_slash():
    assert load_settings().url == "https://cdn.example.com/no-slash/"


@override_settings(TONES={})
def test_default_url_uses_static_url():
    assert load_settings().url == "/static/tones/"


@override_settings(TONES={"URL": 42})
def test_bad_url_is_improperly_configured():
    with pytest.raises(ImproperlyConfigured):
        load_settings()


@override_settings(TONES={"TOKEN": "custom"})
def test_option_name_uses_token():
    assert load_settings().option_name("maint_version") == "custom_maint_version"


def test_requirements_check_passes():
    assert check_requirements() == []


def test_requirements_check_reports_error_with_reasons():
    with patch("tones.checks.requirement_errors", return_value=["Needs A", "Needs B"]):
        errors = check_requirements()
        met = meets_requirements()

    assert met is False
    assert [e.id for e in errors] == ["tones.E001"]
    assert errors[0].hint == "Needs A; Needs B"
