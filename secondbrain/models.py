"""Pydantic models for saved content, notes, share links and answers."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ItemType = Literal["youtube", "twitter"]


class SavedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    link: str = ""
    type: ItemType
    description: Optional[str] = None
    tags: List[str] = []


class Note(BaseModel):
    id: str
    title: str
    content: str = ""
    color_index: int = Field(0, ge=0, le=9)
    is_pinned: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class ShareLink(BaseModel):
    """Read-only share link; one per brain."""

    hash: str


class EnrichmentResult(BaseModel):
    """Per-item enrichment, in memory only."""

    item_id: str
    base_text: str
    platform_details: Optional[str] = None
    description: Optional[str] = None
    news_digest: Optional[str] = None

    def to_block(self) -> str:
        parts = [self.base_text]
        if self.platform_details:
            parts.append(self.platform_details)
        if self.description:
            parts.append(f"User Notes: {self.description}")
        if self.news_digest:
            parts.append(f"Latest News:\n{self.news_digest}")
        return "\n".join(parts)


class SourceCounts(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    notes_count: int = Field(0, alias="notesCount")
    content_count: int = Field(0, alias="contentCount")


class Answer(BaseModel):
    text: str
    sources: SourceCounts
