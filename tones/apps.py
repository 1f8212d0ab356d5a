import logging

from django.apps import AppConfig
from django.core import checks
from django.db import DEFAULT_DB_ALIAS
from django.db.models.signals import post_migrate
from django.urls import clear_url_caches
from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)


def activate(sender, using=DEFAULT_DB_ALIAS, **kwargs):
    """Runs after this app's migrations: pending maintenance, then fresh URL caches."""
    from .maintenance import maybe_run_maintenance

    if not sender.requirements_met:
        return
    version = maybe_run_maintenance(sender.context, using=using)
    clear_url_caches()
    logger.info("Tones activated at maintenance version %d", version)


class TonesConfig(AppConfig):
    name = "tones"
    verbose_name = _("Tones")
    default_auto_field = "django.db.models.AutoField"

    context = None
    requirements_met = False

    def ready(self):
        from .checks import check_requirements, meets_requirements
        from .conf import AppContext, load_settings
        from .registry import Registry, register_schema

        checks.register(check_requirements)
        self.requirements_met = meets_requirements()
        if not self.requirements_met:
            return

        registry = Registry()
        register_schema(registry)
        self.context = AppContext(settings=load_settings(self.name), registry=registry)

        post_migrate.connect(activate, sender=self, dispatch_uid="tones.activate")
