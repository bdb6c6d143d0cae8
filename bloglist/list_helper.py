"""
Summary helpers for a list of blog posts.

Each function accepts an ordered sequence of blogs, where a blog is either a
dictionary or a `Blog` model instance, and reduces it to a single value. The
input is never modified. Order only matters when breaking ties: the first
blog (or the first author seen) that reaches the maximum wins.
"""
from collections.abc import Mapping


def _field(blog, name, default=None):
    if isinstance(blog, Mapping):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog) -> int:
    # Missing likes count as zero
    return _field(blog, 'likes') or 0


def _author(blog) -> str:
    return _field(blog, 'author') or ''


def dummy(blogs) -> int:
    return 1


def total_likes(blogs) -> int:
    """Return the sum of likes over all blogs (0 for an empty list)."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs) -> dict:
    """Return the title, author and likes of the most liked blog.

    An empty dictionary is returned for an empty list.
    """
    top_blog = None
    for blog in blogs:
        if top_blog is None or _likes(blog) > _likes(top_blog):
            top_blog = blog

    if top_blog is None:
        return {}
    return {
        'title': _field(top_blog, 'title'),
        'author': _author(top_blog),
        'likes': _likes(top_blog),
    }


def _top_author(totals: dict) -> str:
    # `max()` returns the first maximal key, and dicts keep insertion order
    if not totals:
        return ''
    return max(totals, key=totals.get)


def most_blogs(blogs) -> str:
    """Return the author with the most blogs ('' for an empty list)."""
    blog_counts = {}
    for blog in blogs:
        author = _author(blog)
        blog_counts[author] = blog_counts.get(author, 0) + 1
    return _top_author(blog_counts)


def most_likes(blogs) -> str:
    """Return the author with the most likes summed over their blogs."""
    likes_by_author = {}
    for blog in blogs:
        author = _author(blog)
        likes_by_author[author] = likes_by_author.get(author, 0) + _likes(blog)
    return _top_author(likes_by_author)
