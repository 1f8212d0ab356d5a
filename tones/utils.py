import re

MP3_DIR = "assets/mp3/"
MP3_SUFFIX = "_-6dBFS_5s.mp3"

# Characters that are never kept in a file name.
_SPECIAL_CHARS = (
    "?", "[", "]", "/", "\\", "=", "<", ">", ":", ";", ",", "'", '"', "&",
    "$", "#", "*", "(", ")", "|", "~", "`", "!", "{", "}", "%", "+",
    "’", "«", "»", "”", "“", "\x00",
)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_DOTS_RE = re.compile(r"\.{2,}")
_DASH_RE = re.compile(r"[\r\n\t -]+")


def sanitize_file_name(name) -> str:
    """
    Strip characters that are unsafe in a single path segment.

    Case is preserved. Path separators and special characters are removed,
    dot runs collapse to one dot, whitespace and dash runs become one dash,
    and leading/trailing '.', '-' and '_' are trimmed.
    """
    if name is None:
        return ""
    name = str(name)
    name = _CONTROL_RE.sub("", name)
    for ch in _SPECIAL_CHARS:
        name = name.replace(ch, "")
    name = _DOTS_RE.sub(".", name)
    name = _DASH_RE.sub("-", name)
    return name.strip(".-_")


def tone_file_url(base_url: str, file_name) -> str:
    return f"{base_url}{MP3_DIR}{sanitize_file_name(file_name)}{MP3_SUFFIX}"
