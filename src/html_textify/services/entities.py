import re

# Order matters: "&amp;lt;" decodes all the way to "<".
_ENTITIES = (
    (re.compile(r"&nbsp;", re.IGNORECASE), " "),
    (re.compile(r"&amp;", re.IGNORECASE), "&"),
    (re.compile(r"&lt;", re.IGNORECASE), "<"),
    (re.compile(r"&gt;", re.IGNORECASE), ">"),
)

_TAG_SPLIT_RE = re.compile(r"(</?[a-z][a-z0-9-]*\b[^>]*>)", re.IGNORECASE)


def decode_entities(text: str) -> str:
    for pattern, replacement in _ENTITIES:
        text = pattern.sub(replacement, text)
    return text


def decode_text_entities(text: str) -> str:
    """Decode entities in text runs only, leaving any remaining tag byte-identical."""
    parts = _TAG_SPLIT_RE.split(text)
    # re.split with one capturing group puts the tags at odd indexes.
    return "".join(part if index % 2 else decode_entities(part) for index, part in enumerate(parts))
