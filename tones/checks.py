from django.core.checks import Error


def requirement_errors() -> list:
    """Reasons the app cannot run; empty when every requirement is met."""
    # No requirements yet.
    return []


def meets_requirements() -> bool:
    return not requirement_errors()


def check_requirements(app_configs=None, **kwargs):
    errors = requirement_errors()
    if not errors:
        return []
    return [
        Error(
            "Tones is missing requirements and cannot run.",
            hint="; ".join(errors),
            obj="tones",
            id="tones.E001",
        )
    ]
