"""Tests for the blog aggregates: pure logic, no mocks needed."""

import pytest

from bloglist.errors import EmptyInputError, ErrorKind
from bloglist.models.blog import BlogRecord, FavoriteBlog
from bloglist.services.list_helper import blog_stats, dummy, favorite_blog, total_likes
from bloglist.tests.helpers import INITIAL_BLOGS, make_blogs


def _initial_records() -> list[BlogRecord]:
    return [BlogRecord(id=str(i), **blog) for i, blog in enumerate(INITIAL_BLOGS)]


def test_dummy_returns_one():
    assert dummy([]) == 1
    assert dummy(make_blogs(3, 4)) == 1


class TestTotalLikes:
    """Tests for total_likes()."""

    def test_empty_list_is_zero(self):
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self):
        assert total_likes(make_blogs(5)) == 5

    def test_bigger_list_is_summed(self):
        assert total_likes(_initial_records()) == 24

    def test_accepts_any_iterable(self):
        assert total_likes(b for b in make_blogs(1, 2, 3)) == 6


class TestFavoriteBlog:
    """Tests for favorite_blog()."""

    def test_empty_list_raises(self):
        with pytest.raises(EmptyInputError) as exc_info:
            favorite_blog([])
        assert exc_info.value.kind is ErrorKind.EMPTY_INPUT

    def test_empty_input_is_a_value_error(self):
        with pytest.raises(ValueError):
            favorite_blog([])

    def test_single_blog_is_the_favorite(self):
        assert favorite_blog(make_blogs(0)) == FavoriteBlog(
            title="Blog 0", author="Author 0", likes=0
        )

    def test_most_liked_blog_wins(self):
        result = favorite_blog(_initial_records())
        assert result == FavoriteBlog(
            title="First class tests", author="Robert C. Martin", likes=10
        )

    def test_projection_drops_id_and_url(self):
        result = favorite_blog(make_blogs(1, 9, 3))
        assert result.model_dump() == {"title": "Blog 1", "author": "Author 1", "likes": 9}

    def test_tie_keeps_first_occurrence(self):
        blogs = [
            BlogRecord(id="a", title="X", url="http://x", likes=5),
            BlogRecord(id="b", title="Y", url="http://y", likes=5),
        ]
        result = favorite_blog(blogs)
        assert result.title == "X"
        assert result.likes == 5

    def test_all_equal_returns_first(self):
        assert favorite_blog(make_blogs(4, 4, 4, 4)).title == "Blog 0"

    def test_tie_after_a_lower_blog(self):
        assert favorite_blog(make_blogs(1, 8, 2, 8)).title == "Blog 1"

    def test_does_not_mutate_input(self):
        blogs = make_blogs(3, 7, 7)
        before = [b.model_dump() for b in blogs]
        first = favorite_blog(blogs)
        second = favorite_blog(blogs)
        assert first == second
        assert [b.model_dump() for b in blogs] == before
        assert total_likes(blogs) == total_likes(blogs) == 17


class TestBlogStats:
    """Tests for blog_stats()."""

    def test_empty_collection(self):
        stats = blog_stats([])
        assert stats.count == 0
        assert stats.total_likes == 0
        assert stats.favorite is None

    def test_initial_blogs(self):
        stats = blog_stats(_initial_records())
        assert stats.count == 5
        assert stats.total_likes == 24
        assert stats.favorite.likes == 10
