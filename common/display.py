"""Display and formatting utilities."""

import hashlib
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)

# Colors for item types and note badges (readable on dark backgrounds)
TYPE_COLORS = {
    "youtube": "bright_red",
    "twitter": "bright_cyan",
}

NOTE_COLORS = [
    "bright_magenta", "bright_cyan", "bright_green", "bright_yellow",
    "bright_blue", "bright_red", "magenta", "cyan", "green", "yellow",
]


def get_type_color(item_type: str) -> str:
    """Get the display color for a saved item type."""
    return TYPE_COLORS.get(item_type, "white")


def get_note_color(color_index: int) -> str:
    """Map a note's color index (0-9) to a rich color."""
    return NOTE_COLORS[color_index % len(NOTE_COLORS)]


def get_tag_color(tag_name: str) -> str:
    """Get a consistent color for a tag based on its name."""
    tag_hash = int(hashlib.md5(tag_name.encode()).hexdigest(), 16)
    return NOTE_COLORS[tag_hash % len(NOTE_COLORS)]


def format_tags_display(tags: list[str]) -> str:
    """Format a list of tag names as a colored Rich markup string."""
    return ", ".join(
        f"[{get_tag_color(t)}]{escape(t)}[/{get_tag_color(t)}]" for t in tags
    )
