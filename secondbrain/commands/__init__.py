"""Command implementations for secondbrain tools."""

from .ask import ask, health
from .content import add_item, delete_item, list_items
from .notes import note_add, note_delete, note_edit, note_list, note_pin
from .share import share, show_shared

__all__ = [
    "add_item", "ask", "delete_item", "health", "list_items",
    "note_add", "note_delete", "note_edit", "note_list", "note_pin",
    "share", "show_shared",
]
