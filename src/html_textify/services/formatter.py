from __future__ import annotations

import logging
import re
from typing import Iterable

from html_textify.services.entities import decode_text_entities
from html_textify.services.tag_filter import TagFilter
from html_textify.services.tag_passes import rewrite_tags
from html_textify.services.tag_stripper import strip_tags
from html_textify.services.wrapping import wrap_by_length, wrap_by_words

logger = logging.getLogger(__name__)

EXCESS_NEWLINES_RE = re.compile(r"\n{3,}")


def preserve_format(html: str, ignore_tags: Iterable[str] | None = None) -> str:
    """Convert HTML to readable plain text, keeping tags named in ``ignore_tags`` intact.

    Headings and paragraphs end in a blank line, ``<br>`` becomes a newline, bold and
    italic become ``**``/``*``, links become ``[text](href)``, lists become ``- ``/``N. ``
    items, blockquotes get ``> `` prefixes and tables become tab-delimited rows. The
    four common entities are decoded and newline runs are capped at two.

    >>> preserve_format("<p>Hello <b>world</b></p>")
    'Hello **world**'
    >>> preserve_format('<a href="https://example.com">Link</a>', ignore_tags=["a"])
    '<a href="https://example.com">Link</a>'
    """
    if not html:
        return ""

    tags = TagFilter.from_names(ignore_tags)
    text = rewrite_tags(html, tags)
    text = strip_tags(text, tags)
    text = decode_text_entities(text)
    return EXCESS_NEWLINES_RE.sub("\n\n", text).strip()


def textify(
    html: str,
    preserve_formatting: bool = True,
    ignore_tags: Iterable[str] | None = None,
    wrap_words: int | None = None,
    wrap_length: int | None = None,
) -> str:
    """Convert HTML to plain text with optional formatting and wrapping.

    Strip mode removes tags only; entities are left encoded. ``wrap_words`` takes
    priority over ``wrap_length`` when both are positive.

    >>> textify("<p>Hello <b>world</b></p>", preserve_formatting=False)
    'Hello world'
    >>> textify("<p>one two three four five</p>", wrap_words=2)
    'one two\\nthree four\\nfive'
    """
    if not html:
        return ""

    if preserve_formatting:
        output = preserve_format(html, ignore_tags)
    else:
        output = strip_tags(html, TagFilter.from_names(ignore_tags)).strip()

    if wrap_words and wrap_words > 0:
        output = wrap_by_words(output, wrap_words)
    elif wrap_length and wrap_length > 0:
        output = wrap_by_length(output, wrap_length)

    logger.debug(
        "Textified document",
        extra={
            "event": "textify_completed",
            "preserve_formatting": preserve_formatting,
            "input_chars": len(html),
            "output_chars": len(output),
        },
    )
    return output
