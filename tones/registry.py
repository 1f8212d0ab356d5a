"""
Content type and meta field declarations for the tones app.

The registry is owned by the app context; nothing here is process-global.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from django.utils.translation import gettext_lazy as _

logger = logging.getLogger(__name__)

TONE_TYPE = "tones"
FREQ_KEY = "tone_freq"
FILE_KEY = "tone_file"


@dataclass(frozen=True)
class PostType:
    name: str
    label: str
    singular_label: str
    public: bool = True
    has_archive: bool = False
    slug: str = ""


@dataclass(frozen=True)
class MetaField:
    post_type: str
    key: str
    data_type: str = "string"
    single: bool = True
    show_in_rest: bool = False
    label: str = ""


class Registry:
    def __init__(self):
        self._types: Dict[str, PostType] = {}
        self._fields: Dict[Tuple[str, str], MetaField] = {}

    def declare_type(self, post_type: PostType) -> PostType:
        self._types[post_type.name] = post_type
        logger.debug("Declared content type %s", post_type.name)
        return post_type

    def declare_field(self, field: MetaField) -> MetaField:
        if field.post_type not in self._types:
            raise LookupError(f"Unknown content type: {field.post_type}")
        # Re-declaring keeps the original position, so field order is stable.
        self._fields[(field.post_type, field.key)] = field
        logger.debug("Declared meta field %s.%s", field.post_type, field.key)
        return field

    def get_type(self, name: str) -> PostType:
        try:
            return self._types[name]
        except KeyError:
            raise LookupError(f"Unknown content type: {name}") from None

    def fields_for(self, type_name: str) -> List[MetaField]:
        return [f for (t, _key), f in self._fields.items() if t == type_name]

    def field_keys(self, type_name: str) -> List[str]:
        return [f.key for f in self.fields_for(type_name)]


def register_schema(registry: Registry) -> None:
    """Declare the tones type and its two meta fields. Safe to call repeatedly."""
    registry.declare_type(PostType(
        name=TONE_TYPE,
        label=_("Tones"),
        singular_label=_("Tone"),
        public=True,
        has_archive=True,
        slug="tones",
    ))
    registry.declare_field(MetaField(
        post_type=TONE_TYPE,
        key=FREQ_KEY,
        data_type="integer",
        single=True,
        show_in_rest=True,
        label=_("Tone Frequency"),
    ))
    registry.declare_field(MetaField(
        post_type=TONE_TYPE,
        key=FILE_KEY,
        data_type="string",
        single=True,
        show_in_rest=True,
        label=_("Tone File"),
    ))
