"""
Read-only settings and application context for the tones app.

Host projects configure the app with an optional ``TONES`` dict:

    TONES = {
        "URL": "https://cdn.example.com/tones/",   # base URL of public assets
        "TOKEN": "mad_tones",                       # prefix for stored options
    }
"""
from dataclasses import dataclass
from pathlib import Path

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from . import __version__
from .registry import Registry

DEFAULT_TOKEN = "mad_tones"


@dataclass(frozen=True)
class AppSettings:
    version: str
    basename: str
    url: str
    path: str
    token: str = DEFAULT_TOKEN

    def option_name(self, name: str) -> str:
        return f"{self.token}_{name}"


@dataclass(frozen=True)
class AppContext:
    settings: AppSettings
    registry: Registry


def load_settings(app_name: str = "tones") -> AppSettings:
    user = getattr(settings, "TONES", None) or {}

    url = user.get("URL")
    if url is None:
        url = f"{settings.STATIC_URL or '/static/'}tones/"
    if not isinstance(url, str):
        raise ImproperlyConfigured("TONES['URL'] must be a string")
    if not url.endswith("/"):
        url += "/"

    return AppSettings(
        version=__version__,
        basename=app_name,
        url=url,
        path=f"{Path(__file__).resolve().parent}/",
        token=user.get("TOKEN", DEFAULT_TOKEN),
    )


def get_context() -> AppContext:
    return apps.get_app_config("tones").context
