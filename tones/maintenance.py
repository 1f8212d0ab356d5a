"""
One-time upgrade steps, gated by a persisted maintenance version.
"""
import logging
from typing import Callable, Dict

from django.db import DEFAULT_DB_ALIAS

from .models import Option

logger = logging.getLogger(__name__)

MAINTENANCE_VERSION = 1
OPTION = "maint_version"

# version -> upgrade step. Steps run at most once, in ascending order.
STEPS: Dict[int, Callable[[], None]] = {}


def run(version: int) -> None:
    step = STEPS.get(version)
    if step is None:
        logger.info("No maintenance step for version %d", version)
        return
    logger.info("Running maintenance step %d", version)
    step()


def stored_version(context, using=DEFAULT_DB_ALIAS) -> int:
    value = Option.get_value(context.settings.option_name(OPTION), using=using)
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def maybe_run_maintenance(context, target: int = MAINTENANCE_VERSION, using=DEFAULT_DB_ALIAS) -> int:
    current = stored_version(context, using=using)
    for version in range(current + 1, target + 1):
        run(version)
    Option.set_value(context.settings.option_name(OPTION), target, using=using)
    return target
