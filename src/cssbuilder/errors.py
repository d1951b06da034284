"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector import Stage

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class DuplicateSelectorPartError(SelectorError):
    """A single-occurrence part (element or pseudo-element) was added twice."""

    def __init__(self, part: Stage, message: str = DUPLICATE_MESSAGE) -> None:
        super().__init__(message)
        self.part = part


class OrderViolationError(SelectorError):
    """A part was added after a part that must follow it."""

    def __init__(
        self, part: Stage, current: Stage, message: str = ORDER_MESSAGE
    ) -> None:
        super().__init__(message)
        self.part = part
        self.current = current


class SerializationError(SelectorError):
    """A serialized selector could not be decoded."""
