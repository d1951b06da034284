"""cssbuilder: immutable, chainable CSS selector builder."""
from __future__ import annotations

from cssbuilder.errors import (
    DuplicateSelectorPartError,
    OrderViolationError,
    SelectorError,
    SerializationError,
)
from cssbuilder.selector import Selector, Stage, builder

__version__ = "0.1.0"

# Module-level entry points, all starting from the shared empty selector.
element = builder.element
id = builder.id
class_ = builder.class_
attr = builder.attr
pseudo_class = builder.pseudo_class
pseudo_element = builder.pseudo_element
combine = builder.combine
pseudoClass = pseudo_class
pseudoElement = pseudo_element

__all__ = [
    "__version__",
    # builder
    "Selector",
    "Stage",
    "builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "pseudoClass",
    "pseudoElement",
    "combine",
    # errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "OrderViolationError",
    "SerializationError",
]
