"""attrlit - flag raw string literals in JSX attributes."""

__version__ = "0.1.0"
