"""Message payload variants accepted by loggers.

Purpose
-------
Model the closed set of message kinds a call site may hand to a logger: plain
text, an ordered group of sub-messages, a structured Markdown document, and a
captured exception. Each kind is its own frozen dataclass so renderers can
dispatch on the tag instead of probing arbitrary objects.

Contents
--------
* :class:`TextMessage`, :class:`MultiPartMessage`, :class:`DocumentMessage`,
  :class:`ErrorMessage` - the tagged union members.
* :data:`Message` - the union alias.
* :func:`as_message` - coercion from raw call-site values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from rich.markdown import Markdown


@dataclass(slots=True, frozen=True)
class TextMessage:
    """Plain text rendered verbatim."""

    text: str


@dataclass(slots=True, frozen=True)
class MultiPartMessage:
    """Ordered sub-messages, each followed by a newline when rendered."""

    parts: tuple["Message", ...]


@dataclass(slots=True, frozen=True)
class DocumentMessage:
    """Markdown document rendered with terminal styling on interactive streams."""

    document: Markdown

    @property
    def source(self) -> str:
        """Return the raw Markdown text used for plain output."""

        return self.document.markup


@dataclass(slots=True, frozen=True)
class ErrorMessage:
    """Captured exception rendered with its traceback when one is attached."""

    error: BaseException


Message = Union[TextMessage, MultiPartMessage, DocumentMessage, ErrorMessage]

_MESSAGE_TYPES = (TextMessage, MultiPartMessage, DocumentMessage, ErrorMessage)


def as_message(value: Any) -> Message:
    """Coerce a call-site value into one of the :data:`Message` variants.

    Examples
    --------
    >>> as_message("hi")
    TextMessage(text='hi')
    >>> as_message(("a", "b")).parts
    (TextMessage(text='a'), TextMessage(text='b'))
    """

    if isinstance(value, _MESSAGE_TYPES):
        return value
    if isinstance(value, str):
        return TextMessage(value)
    if isinstance(value, (tuple, list)):
        return MultiPartMessage(tuple(as_message(part) for part in value))
    if isinstance(value, Markdown):
        return DocumentMessage(value)
    if isinstance(value, BaseException):
        return ErrorMessage(value)
    return TextMessage(str(value))


__all__ = [
    "DocumentMessage",
    "ErrorMessage",
    "Message",
    "MultiPartMessage",
    "TextMessage",
    "as_message",
]
