import re


class InvalidArgumentError(ValueError):
    pass


_WHITESPACE_RE = re.compile(r"\s+")


def _words(text: str) -> list[str]:
    stripped = (text or "").strip()
    if not stripped:
        return []
    return _WHITESPACE_RE.split(stripped)


def wrap_by_words(text: str, count: int) -> str:
    """Wrap text into lines holding ``count`` words each; the last line may be shorter.

    Raises:
        InvalidArgumentError: when ``count`` is not strictly positive.
    """
    if count <= 0:
        raise InvalidArgumentError("wrap count must be greater than 0")

    words = _words(text)
    lines = [" ".join(words[i : i + count]) for i in range(0, len(words), count)]
    return "\n".join(lines)


def wrap_by_length(text: str, max_chars: int) -> str:
    """Greedy word wrap to at most ``max_chars`` characters per line.

    A word longer than ``max_chars`` is kept whole on its own line. A non-positive
    budget disables wrapping and returns the text unchanged.
    """
    if max_chars <= 0:
        return text

    lines: list[str] = []
    current = ""
    for word in _words(text):
        if not current:
            current = word
        elif len(current) + 1 + len(word) > max_chars:
            lines.append(current)
            current = word
        else:
            current = f"{current} {word}"

    if current:
        lines.append(current)
    return "\n".join(lines)
