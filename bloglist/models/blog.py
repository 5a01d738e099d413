"""Blog record data models."""

from pydantic import BaseModel, Field


class BlogDraft(BaseModel):
    """A normalized blog accepted for creation, not yet stored."""

    title: str = Field(..., min_length=1)
    author: str = ""
    url: str = Field(..., min_length=1)
    likes: int = Field(default=0, ge=0)


class BlogRecord(BlogDraft):
    """A stored blog. ``id`` is assigned by storage."""

    id: str


class FavoriteBlog(BaseModel):
    """Projection of the most liked blog (no id, no url)."""

    title: str
    author: str
    likes: int


class BlogStats(BaseModel):
    """Aggregates over the whole blog collection."""

    count: int
    total_likes: int
    favorite: FavoriteBlog | None = None
