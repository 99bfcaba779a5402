import re

from html_textify.services.tag_filter import TagFilter

ANY_TAG_RE = re.compile(r"<[^>]+>")
NAMED_TAG_RE = re.compile(r"</?(?P<name>[a-z][a-z0-9-]*)\b[^>]*>", re.IGNORECASE)


def strip_tags(text: str, tags: TagFilter) -> str:
    """Remove every tag whose name is not in ``tags``.

    With an empty filter any ``<...>`` run goes, comments and declarations included.
    Otherwise only named tags are considered and ignored ones are kept verbatim.
    """
    if not tags:
        return ANY_TAG_RE.sub("", text)

    def _replace(match: re.Match[str]) -> str:
        return match.group(0) if tags.ignores(match.group("name")) else ""

    return NAMED_TAG_RE.sub(_replace, text)
