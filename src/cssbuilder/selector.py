"""Immutable, chainable CSS selector builder.

Usage example:
    builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        => 'a[href$=".png"]:focus'

    builder.combine(
        builder.element("div").id("main"), "+", builder.element("table").id("data")
    ).stringify()
        => 'div#main + table#data'
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import IntEnum

from cssbuilder.errors import DuplicateSelectorPartError, OrderViolationError

__all__ = ["Stage", "Selector", "builder"]

logger = logging.getLogger(__name__)


class Stage(IntEnum):
    """Position of a selector part in compound-selector grammar order."""

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6


def _append(existing: str | None, fragment: str) -> str:
    return fragment if existing is None else existing + fragment


@dataclass(frozen=True)
class Selector:
    """A (possibly partial) compound selector, or a combination of two selectors.

    Every builder method returns a new Selector; the receiver is never changed.
    Parts are stored already rendered, punctuation included.

    Attributes:
        element_part: Element name, e.g. ``div``.
        id_part: One or more ``#id`` fragments.
        class_part: ``.class`` fragments in the order added.
        attr_part: ``[attr]`` fragments in the order added.
        pseudo_class_part: ``:pseudo-class`` fragments in the order added.
        pseudo_element_part: The ``::pseudo-element`` fragment.
        stage: Grammar position of the most recently added part.
        rendered_composite: Set by :meth:`combine`; when present it is the
            whole rendering and the other parts are ignored.
    """

    element_part: str | None = None
    id_part: str | None = None
    class_part: str | None = None
    attr_part: str | None = None
    pseudo_class_part: str | None = None
    pseudo_element_part: str | None = None
    stage: Stage = Stage.NONE
    rendered_composite: str | None = None

    # --- validation -----------------------------------------------------------

    def _check_order(self, part: Stage) -> None:
        if self.stage > part:
            logger.debug(
                "Rejected %s after %s: out of order", part.name, self.stage.name
            )
            raise OrderViolationError(part, self.stage)

    def _check_unique(self, part: Stage, existing: str | None) -> None:
        if existing is not None:
            logger.debug("Rejected second %s: %r already set", part.name, existing)
            raise DuplicateSelectorPartError(part)

    def _advance(self, part: Stage, **changes: str) -> Selector:
        result = dataclasses.replace(self, stage=part, **changes)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Added %s -> %r", part.name, result.stringify())
        return result

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> Selector:
        """Set the element name. Allowed once, and only as the first part."""
        self._check_unique(Stage.ELEMENT, self.element_part)
        self._check_order(Stage.ELEMENT)
        return self._advance(Stage.ELEMENT, element_part=value)

    def id(self, value: str) -> Selector:
        """Append ``#value``."""
        self._check_order(Stage.ID)
        return self._advance(Stage.ID, id_part=_append(self.id_part, f"#{value}"))

    def class_(self, value: str) -> Selector:
        """Append ``.value``."""
        self._check_order(Stage.CLASS)
        return self._advance(
            Stage.CLASS, class_part=_append(self.class_part, f".{value}")
        )

    def attr(self, value: str) -> Selector:
        """Append ``[value]``. The value is used verbatim."""
        self._check_order(Stage.ATTRIBUTE)
        return self._advance(
            Stage.ATTRIBUTE, attr_part=_append(self.attr_part, f"[{value}]")
        )

    def pseudo_class(self, value: str) -> Selector:
        """Append ``:value``."""
        self._check_order(Stage.PSEUDO_CLASS)
        return self._advance(
            Stage.PSEUDO_CLASS,
            pseudo_class_part=_append(self.pseudo_class_part, f":{value}"),
        )

    def pseudo_element(self, value: str) -> Selector:
        """Set ``::value``. Allowed once; always last in grammar order."""
        self._check_unique(Stage.PSEUDO_ELEMENT, self.pseudo_element_part)
        return self._advance(Stage.PSEUDO_ELEMENT, pseudo_element_part=f"::{value}")

    pseudoClass = pseudo_class
    pseudoElement = pseudo_element

    # --- composition ----------------------------------------------------------

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with *combinator*, padded by one space each side.

        The result is appended to any combination already held by the receiver.
        """
        rendered = f"{left.stringify()} {combinator} {right.stringify()}"
        result = dataclasses.replace(
            self, rendered_composite=_append(self.rendered_composite, rendered)
        )
        logger.debug("Combined with %r -> %r", combinator, result.rendered_composite)
        return result

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        if self.rendered_composite is not None:
            return self.rendered_composite
        parts = (
            self.element_part,
            self.id_part,
            self.class_part,
            self.attr_part,
            self.pseudo_class_part,
            self.pseudo_element_part,
        )
        return "".join(part for part in parts if part is not None)

    def __str__(self) -> str:
        return self.stringify()


# ``class`` is a keyword, so the method is defined as ``class_`` and also
# published under its CSS name for getattr-based callers.
setattr(Selector, "class", Selector.class_)

builder = Selector()
