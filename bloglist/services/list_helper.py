"""Aggregates over a blog collection.

Pure functions: they read the sequence they are given and never mutate it.
"""

from collections.abc import Iterable

from bloglist.errors import EmptyInputError
from bloglist.models.blog import BlogDraft, BlogStats, FavoriteBlog


def dummy(blogs: Iterable[BlogDraft]) -> int:
    """Always 1, whatever the input."""
    return 1


def total_likes(blogs: Iterable[BlogDraft]) -> int:
    """Sum of ``likes`` over *blogs*; 0 for an empty collection."""
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Iterable[BlogDraft]) -> FavoriteBlog:
    """Return the most liked blog as ``{title, author, likes}``.

    A later blog only wins with strictly more likes, so on a tie the first
    one in input order is kept.  Raises ``EmptyInputError`` for no blogs.
    """
    best: BlogDraft | None = None
    for blog in blogs:
        if best is None or blog.likes > best.likes:
            best = blog
    if best is None:
        raise EmptyInputError("favorite_blog requires at least one blog")
    return FavoriteBlog(title=best.title, author=best.author, likes=best.likes)


def blog_stats(blogs: list[BlogDraft]) -> BlogStats:
    """Count, total likes and favorite in one response; favorite is None when empty."""
    favorite = favorite_blog(blogs) if blogs else None
    return BlogStats(count=len(blogs), total_likes=total_likes(blogs), favorite=favorite)
