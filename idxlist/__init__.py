"""Singly and doubly linked lists with constant-time index handles, slices and moves."""

__version__ = "0.1.0"

__all__ = [
    "col",
    "singly_view",
    "singly_list",
    "ranges",
    "doubly_view",
    "doubly_mut",
    "doubly_moves",
    "doubly_list",
]