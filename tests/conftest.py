"""
Shared fixtures for the test suite.

Boots Django against tests/settings.py, builds the test database once per
session and rolls back every test's writes.
"""
import os
from dataclasses import replace

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")
django.setup()

from django.apps import apps  # noqa: E402
from django.db import connection, transaction  # noqa: E402
from django.test import Client  # noqa: E402
from django.test.utils import setup_test_environment, teardown_test_environment  # noqa: E402

from tones.models import Tone  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def django_test_db():
    setup_test_environment()
    old_name = connection.creation.create_test_db(verbosity=0)
    yield
    connection.creation.destroy_test_db(old_name, verbosity=0)
    teardown_test_environment()


@pytest.fixture(autouse=True)
def db(django_test_db):
    with transaction.atomic():
        yield
        transaction.set_rollback(True)


@pytest.fixture()
def client():
    return Client()


def _make_tone(title="A440", freq=None, file=None, **fields):
    tone = Tone.objects.create(title=title, **fields)
    if freq is not None:
        tone.set_meta("tone_freq", freq)
    if file is not None:
        tone.set_meta("tone_file", file)
    return tone


@pytest.fixture()
def make_tone():
    """Factory creating a tone and setting whichever meta values are given."""
    return _make_tone


@pytest.fixture()
def app_settings():
    """Swap fields of the app settings for one test."""
    config = apps.get_app_config("tones")
    original = config.context

    def _override(**changes):
        config.context = replace(original, settings=replace(original.settings, **changes))
        return config.context.settings

    yield _override
    config.context = original
