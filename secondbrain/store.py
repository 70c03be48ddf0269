"""Local JSON store for saved content, notes and the share link."""

import json
import os
import secrets
import string
import tempfile
import uuid
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from common.url_utils import detect_link_type, normalize_url
from .config import get_brain_path
from .models import Note, SavedItem, ShareLink
from .prompt import ValidationError

SHARE_HASH_LENGTH = 10
SHARE_HASH_ALPHABET = string.ascii_letters + string.digits
NOTE_COLOR_COUNT = 10


class NotFoundError(KeyError):
    """Raised when a note, item or share hash does not exist."""
    pass


class BrainFileError(Exception):
    """Raised when the brain file exists but can't be read or parsed."""
    pass


def _empty_brain() -> dict:
    return {"content": [], "notes": [], "share": None}


def load_brain(brain_path: str | None = None) -> dict:
    """Load the brain file, or an empty brain if it doesn't exist.

    Raises:
        BrainFileError: If the file exists but is unreadable or not a JSON object
    """
    path = Path(brain_path or get_brain_path())
    if not path.exists():
        return _empty_brain()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        raise BrainFileError(f"Cannot read brain file {path}: {e}") from e
    if not isinstance(data, dict):
        raise BrainFileError(f"Cannot read brain file {path}: expected a JSON object")
    brain = _empty_brain()
    brain.update(data)
    return brain


def save_brain(brain: dict, brain_path: str | None = None) -> None:
    """Write the brain file through a temp file so a failed write never truncates it."""
    path = Path(brain_path or get_brain_path())
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(brain, ensure_ascii=False, indent=2))
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def _new_id() -> str:
    return uuid.uuid4().hex[:12]


# Saved content

def list_content(brain_path: str | None = None) -> List[SavedItem]:
    return [SavedItem.model_validate(c) for c in load_brain(brain_path)["content"]]


def add_content(
    title: str,
    link: str,
    item_type: str | None = None,
    description: str | None = None,
    tags: list[str] | None = None,
    brain_path: str | None = None,
) -> SavedItem:
    """Save a YouTube or Twitter link.

    The type is inferred from the link when not given.

    Raises:
        ValidationError: If the title is empty or the type can't be determined
    """
    if not title or not title.strip():
        raise ValidationError("Title is required")

    item_type = item_type or detect_link_type(link)
    if item_type not in ("youtube", "twitter"):
        raise ValidationError(f"Unsupported link type for {link!r} (expected youtube or twitter)")

    item = SavedItem(
        id=_new_id(),
        title=title.strip(),
        link=normalize_url(link),
        type=item_type,
        description=(description or "").strip() or None,
        tags=tags or [],
    )

    brain = load_brain(brain_path)
    brain["content"].append(item.model_dump())
    save_brain(brain, brain_path)
    return item


def delete_content(content_id: str, brain_path: str | None = None) -> None:
    brain = load_brain(brain_path)
    remaining = [c for c in brain["content"] if c.get("id") != content_id]
    if len(remaining) == len(brain["content"]):
        raise NotFoundError(f"Content not found: {content_id}")
    brain["content"] = remaining
    save_brain(brain, brain_path)


# Notes

def list_notes(brain_path: str | None = None) -> List[Note]:
    """Notes sorted pinned first, then most recently updated."""
    notes = [Note.model_validate(n) for n in load_brain(brain_path)["notes"]]
    return sorted(notes, key=lambda n: (n.is_pinned, n.updated_at), reverse=True)


def add_note(title: str, content: str = "", brain_path: str | None = None) -> Note:
    if not title or not title.strip():
        raise ValidationError("Title is required")

    brain = load_brain(brain_path)
    note = Note(
        id=_new_id(),
        title=title.strip(),
        content=content or "",
        color_index=len(brain["notes"]) % NOTE_COLOR_COUNT,
    )
    brain["notes"].append(note.model_dump(mode="json"))
    save_brain(brain, brain_path)
    return note


def update_note(
    note_id: str,
    title: Optional[str] = None,
    content: Optional[str] = None,
    is_pinned: Optional[bool] = None,
    brain_path: str | None = None,
) -> Note:
    """Update the given fields of a note; None leaves a field unchanged."""
    brain = load_brain(brain_path)
    for i, raw in enumerate(brain["notes"]):
        if raw.get("id") != note_id:
            continue
        note = Note.model_validate(raw)
        if title:
            note.title = title
        if content is not None:
            note.content = content
        if is_pinned is not None:
            note.is_pinned = is_pinned
        note.updated_at = datetime.now()
        brain["notes"][i] = note.model_dump(mode="json")
        save_brain(brain, brain_path)
        return note
    raise NotFoundError(f"Note not found: {note_id}")


def pin_note(note_id: str, pinned: bool = True, brain_path: str | None = None) -> Note:
    return update_note(note_id, is_pinned=pinned, brain_path=brain_path)


def delete_note(note_id: str, brain_path: str | None = None) -> None:
    brain = load_brain(brain_path)
    remaining = [n for n in brain["notes"] if n.get("id") != note_id]
    if len(remaining) == len(brain["notes"]):
        raise NotFoundError(f"Note not found: {note_id}")
    brain["notes"] = remaining
    save_brain(brain, brain_path)


# Sharing

def _random_hash(length: int = SHARE_HASH_LENGTH) -> str:
    return "".join(secrets.choice(SHARE_HASH_ALPHABET) for _ in range(length))


def share_brain(share: bool = True, brain_path: str | None = None) -> str | None:
    """Enable or disable the read-only share link.

    Returns:
        The share hash (existing one if already shared), or None when disabled
    """
    brain = load_brain(brain_path)
    if share:
        if brain.get("share"):
            return ShareLink.model_validate(brain["share"]).hash
        link = ShareLink(hash=_random_hash())
        brain["share"] = link.model_dump()
        save_brain(brain, brain_path)
        return link.hash

    brain["share"] = None
    save_brain(brain, brain_path)
    return None


def get_shared_content(share_hash: str, brain_path: str | None = None) -> List[SavedItem]:
    """Saved content visible through a share hash.

    Raises:
        NotFoundError: If the hash doesn't match the active share link
    """
    brain = load_brain(brain_path)
    share = ShareLink.model_validate(brain["share"]) if brain.get("share") else None
    if not share_hash or share is None or share.hash != share_hash:
        raise NotFoundError(f"Invalid share link: {share_hash}")
    return [SavedItem.model_validate(c) for c in brain["content"]]
