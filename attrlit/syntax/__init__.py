"""JSX syntax nodes and extraction helpers."""

from .extract import attribute_name, attribute_value, component_name
from .nodes import opening_element_from_estree
from .walk import iter_opening_elements

__all__ = [
    "attribute_name",
    "attribute_value",
    "component_name",
    "iter_opening_elements",
    "opening_element_from_estree",
]
