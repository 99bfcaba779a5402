"""Ordered rewrite passes that turn tag families into markdown-like text.

Each pass takes the working text and the active ``TagFilter`` and returns the new
working text. Passes run in ``REWRITE_PASSES`` order: list and table passes expect
``<br>`` already converted, and a later pass never sees tag syntax produced by an
earlier one because every pass emits plain characters only.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from html_textify.services.tag_filter import TagFilter

logger = logging.getLogger(__name__)

INTER_TAG_WS_RE = re.compile(r">\s+<")
BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
BLOCK_CLOSE_RE = re.compile(r"</(?P<tag>h[1-6]|p)>", re.IGNORECASE)
BOLD_RE = re.compile(r"<(?P<tag>b|strong)>(?P<content>.*?)</(?P=tag)>", re.IGNORECASE)
ITALIC_RE = re.compile(r"<(?P<tag>i|em)>(?P<content>.*?)</(?P=tag)>", re.IGNORECASE)
LINK_RE = re.compile(r'<a\s+href="(?P<href>.*?)".*?>(?P<text>.*?)</a>', re.IGNORECASE)
OL_RE = re.compile(r"<ol>(?P<content>.*?)</ol>", re.IGNORECASE | re.DOTALL)
UL_RE = re.compile(r"<ul>(?P<content>.*?)</ul>", re.IGNORECASE | re.DOTALL)
LI_RE = re.compile(r"<li>(?P<content>.*?)</li>", re.IGNORECASE)
BLOCKQUOTE_RE = re.compile(r"<blockquote>(?P<content>.*?)</blockquote>", re.IGNORECASE | re.DOTALL)
TABLE_RE = re.compile(r"<table>(?P<content>.*?)</table>", re.IGNORECASE | re.DOTALL)
TR_RE = re.compile(r"<tr>(?P<content>.*?)</tr>", re.IGNORECASE)
CELL_RE = re.compile(r"<(?P<tag>t[dh])>(?P<content>.*?)</(?P=tag)>", re.IGNORECASE)

RewritePass = Callable[[str, TagFilter], str]


def collapse_inter_tag_whitespace(text: str, tags: TagFilter) -> str:
    return INTER_TAG_WS_RE.sub("><", text)


def convert_line_breaks(text: str, tags: TagFilter) -> str:
    if tags.ignores("br"):
        return text
    return BR_RE.sub("\n", text)


def convert_block_endings(text: str, tags: TagFilter) -> str:
    # Only closing tags; opening tags are left for the stripper.
    def _replace(match: re.Match[str]) -> str:
        return match.group(0) if tags.ignores(match.group("tag")) else "\n\n"

    return BLOCK_CLOSE_RE.sub(_replace, text)


def _emphasis(pattern: re.Pattern[str], marker: str) -> RewritePass:
    def _pass(text: str, tags: TagFilter) -> str:
        def _replace(match: re.Match[str]) -> str:
            if tags.ignores(match.group("tag")):
                return match.group(0)
            return f"{marker}{match.group('content')}{marker}"

        return pattern.sub(_replace, text)

    return _pass


convert_bold = _emphasis(BOLD_RE, "**")
convert_italic = _emphasis(ITALIC_RE, "*")


def convert_links(text: str, tags: TagFilter) -> str:
    if tags.ignores("a"):
        return text
    return LINK_RE.sub(lambda m: f"[{m.group('text')}]({m.group('href')})", text)


def _list_items(content: str, tags: TagFilter, prefix: Callable[[], str]) -> str:
    def _replace(match: re.Match[str]) -> str:
        if tags.ignores("li"):
            return match.group(0)
        return f"{prefix()}{match.group('content')}\n"

    return LI_RE.sub(_replace, content)


def convert_ordered_lists(text: str, tags: TagFilter) -> str:
    def _replace(match: re.Match[str]) -> str:
        if tags.ignores("ol"):
            return match.group(0)
        counter = 0

        def _number() -> str:
            nonlocal counter
            counter += 1
            return f"{counter}. "

        return _list_items(match.group("content"), tags, _number)

    return OL_RE.sub(_replace, text)


def convert_unordered_lists(text: str, tags: TagFilter) -> str:
    def _replace(match: re.Match[str]) -> str:
        if tags.ignores("ul"):
            return match.group(0)
        return _list_items(match.group("content"), tags, lambda: "- ")

    return UL_RE.sub(_replace, text)


def convert_blockquotes(text: str, tags: TagFilter) -> str:
    if tags.ignores("blockquote"):
        return text

    def _replace(match: re.Match[str]) -> str:
        # Inner <br> is converted here even when "br" itself is ignored.
        content = BR_RE.sub("\n", match.group("content")).strip()
        lines = []
        for line in content.split("\n"):
            line = line.strip()
            lines.append(f"> {line}" if line else "")
        return "\n".join(lines)

    return BLOCKQUOTE_RE.sub(_replace, text)


def convert_tables(text: str, tags: TagFilter) -> str:
    # Ignoring either cell name keeps every cell literal.
    keep_cells = tags.ignores("td") or tags.ignores("th")

    def _cell(match: re.Match[str]) -> str:
        if keep_cells:
            return match.group(0)
        return f"{match.group('content')}\t"

    def _row(match: re.Match[str]) -> str:
        if tags.ignores("tr"):
            return match.group(0)
        # strip() also drops the tab trailing the last cell.
        return CELL_RE.sub(_cell, match.group("content")).strip() + "\n"

    def _table(match: re.Match[str]) -> str:
        if tags.ignores("table"):
            return match.group(0)
        return TR_RE.sub(_row, match.group("content")).strip()

    return TABLE_RE.sub(_table, text)


REWRITE_PASSES: tuple[tuple[str, RewritePass], ...] = (
    ("whitespace", collapse_inter_tag_whitespace),
    ("line_breaks", convert_line_breaks),
    ("block_endings", convert_block_endings),
    ("bold", convert_bold),
    ("italic", convert_italic),
    ("links", convert_links),
    ("ordered_lists", convert_ordered_lists),
    ("unordered_lists", convert_unordered_lists),
    ("blockquotes", convert_blockquotes),
    ("tables", convert_tables),
)


def rewrite_tags(text: str, tags: TagFilter) -> str:
    for name, rewrite in REWRITE_PASSES:
        text = rewrite(text, tags)
        logger.debug(
            "Applied rewrite pass",
            extra={"event": "rewrite_pass_applied", "rewrite_pass": name, "output_chars": len(text)},
        )
    return text
