"""Domain value objects."""

from .query import Direction, Example, Order, Page, PageRequest, Sort

__all__ = ["Direction", "Example", "Order", "Page", "PageRequest", "Sort"]
