import logging
from typing import TYPE_CHECKING, Any

from html_textify.services.formatter import textify
from html_textify.services.wrapping import wrap_by_length, wrap_by_words

if TYPE_CHECKING:
    from html_textify.config import Settings

logger = logging.getLogger(__name__)


class InvalidRequestError(ValueError):
    pass


class InputTooLargeError(ValueError):
    pass


def _optional_int(payload: dict[str, Any], key: str, default: int) -> int:
    value = payload.get(key)
    if value is None:
        return default
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"'{key}' must be an integer")
    return value


def _text_field(payload: dict[str, Any], key: str, settings: "Settings") -> str:
    value = payload.get(key)
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise InvalidRequestError(f"'{key}' must be a string")
    if len(value) > settings.max_input_chars:
        raise InputTooLargeError(f"'{key}' exceeds {settings.max_input_chars} characters")
    return value


def _ignore_tags(payload: dict[str, Any], settings: "Settings") -> list[str]:
    value = payload.get("ignoreTags")
    if value is None:
        return settings.ignore_tag_list
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise InvalidRequestError("'ignoreTags' must be a list of strings")
    return value


def handle_textify_request(payload: Any, settings: "Settings") -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise InvalidRequestError("request body must be a JSON object")

    html = _text_field(payload, "html", settings)

    preserve_formatting = payload.get("preserveFormatting")
    if preserve_formatting is None:
        preserve_formatting = settings.preserve_formatting
    elif not isinstance(preserve_formatting, bool):
        raise InvalidRequestError("'preserveFormatting' must be a boolean")

    ignore_tags = _ignore_tags(payload, settings)
    wrap_words = _optional_int(payload, "wrapWords", settings.wrap_words)
    wrap_length = _optional_int(payload, "wrapLength", settings.wrap_length)

    text = textify(
        html,
        preserve_formatting=preserve_formatting,
        ignore_tags=ignore_tags,
        wrap_words=wrap_words,
        wrap_length=wrap_length,
    )
    logger.info(
        "Processed textify request",
        extra={
            "event": "textify_request_processed",
            "preserve_formatting": preserve_formatting,
            "ignore_tags": ignore_tags,
            "input_chars": len(html),
            "output_chars": len(text),
        },
    )
    return {"status": "ok", "text": text}


def handle_wrap_request(payload: Any, settings: "Settings") -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise InvalidRequestError("request body must be a JSON object")

    text = _text_field(payload, "text", settings)
    words = payload.get("words")
    length = _optional_int(payload, "length", 0)

    if words is not None:
        words = _optional_int(payload, "words", 0)
        # Non-positive counts surface as InvalidArgumentError from the wrapper.
        wrapped = wrap_by_words(text, words)
    elif length:
        wrapped = wrap_by_length(text, length)
    else:
        raise InvalidRequestError("one of 'words' or 'length' is required")

    logger.info(
        "Processed wrap request",
        extra={"event": "wrap_request_processed", "words": words, "length": length},
    )
    return {"status": "ok", "text": wrapped}
