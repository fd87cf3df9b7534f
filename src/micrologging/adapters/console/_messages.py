"""Turn :data:`~micrologging.domain.messages.Message` variants into text.

One renderer per message tag; :func:`render_message` looks the renderer up by
the variant's type. Rendering a captured exception never raises: when the
traceback cannot be formatted the text degrades to ``"<Type>: <message>"``.
"""

from __future__ import annotations

import io
import logging
import re
import traceback
from typing import Any, Callable

from rich.console import Console

from micrologging.adapters._formatting import join_parts, strip_trailing_pad
from micrologging.domain.messages import (
    DocumentMessage,
    ErrorMessage,
    Message,
    MultiPartMessage,
    TextMessage,
    as_message,
)

logger = logging.getLogger(__name__)

_TRAILING_NEWLINE = re.compile(r"\n(\x1b\[[0-9]+m)$")


def chomp_document(text: str) -> str:
    """Remove one trailing newline, also when a colour reset follows it."""

    if text.endswith("\n"):
        return text[:-1]
    return _TRAILING_NEWLINE.sub(r"\1", text)


def _render_text(message: TextMessage, *, interactive: bool, width: int) -> str:
    return message.text


def _render_parts(message: MultiPartMessage, *, interactive: bool, width: int) -> str:
    return join_parts(render_message(part, interactive=interactive, width=width) for part in message.parts)


def _render_document(message: DocumentMessage, *, interactive: bool, width: int) -> str:
    if not interactive:
        return message.source
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        force_terminal=True,
        color_system="standard",
        width=width,
        highlight=False,
        legacy_windows=False,
    )
    console.print(message.document)
    return chomp_document(strip_trailing_pad(buffer.getvalue()))


def _describe(error: BaseException) -> str:
    name = type(error).__name__
    try:
        detail = str(error)
    except Exception:  # noqa: BLE001 - a broken __str__ must not abort the log call
        return name
    return f"{name}: {detail}" if detail else name


def _render_error(message: ErrorMessage, *, interactive: bool, width: int) -> str:
    error = message.error
    if error.__traceback__ is None:
        return _describe(error)
    try:
        return "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip("\n")
    except Exception as exc:  # noqa: BLE001
        logger.debug("Falling back to a trace-less rendering of %s", type(error).__name__, exc_info=exc)
        return _describe(error)


_RENDERERS: dict[type, Callable[..., str]] = {
    TextMessage: _render_text,
    MultiPartMessage: _render_parts,
    DocumentMessage: _render_document,
    ErrorMessage: _render_error,
}


def render_message(message: Message | Any, *, interactive: bool, width: int) -> str:
    """Render ``message`` to a single text blob.

    Raw values are coerced with :func:`as_message` first, so strings, tuples,
    :class:`rich.markdown.Markdown` documents and exceptions are accepted as-is.

    Examples
    --------
    >>> render_message(("a", ("b", "c")), interactive=False, width=80)
    'a\\nb\\nc\\n\\n'
    >>> render_message(ValueError("bad"), interactive=False, width=80)
    'ValueError: bad'
    """

    variant = as_message(message)
    return _RENDERERS[type(variant)](variant, interactive=interactive, width=width)


__all__ = ["chomp_document", "render_message"]
