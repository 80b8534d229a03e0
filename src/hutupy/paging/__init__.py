"""Pagination helpers."""

from .pagination import page_to_range, total_pages, page_rainbow

__all__ = ["page_to_range", "total_pages", "page_rainbow"]
