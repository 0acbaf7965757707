import json

import pytest

from dandesite.constants import MAX_POSTS_PER_PAGE
from dandesite.content_cache import CacheError, ContentCache, sort_posts
from dandesite.models import About, AboutMetadata, Post, PostMetadata


def _about():
    return About(
        content="<p>About</p>",
        metadata=AboutMetadata(
            avatar_image="/images/avatar.png",
            company="Example Co",
            email="author@example.com",
            github_url="https://example.com/github",
            linkedin_url="https://example.com/linkedin",
            name="Site Author",
            occupation="Engineer",
            twitter_url="https://example.com/twitter",
        ),
    )


def _post(slug, date):
    return Post(
        content=f"<p>{slug}</p>",
        metadata=PostMetadata(
            date=date, description="d", tags=["t"], title=slug.title(), slug=slug, draft=False
        ),
    )


def _write(tmp_path, posts):
    about_file = tmp_path / "about.json"
    about_file.write_text(json.dumps(_about().to_dict()), encoding="utf-8")
    blog = tmp_path / "blog"
    blog.mkdir()
    for post in posts:
        (blog / f"{post.metadata.slug}.json").write_text(json.dumps(post.to_dict()), encoding="utf-8")
    return about_file, blog


def test_sort_posts_newest_first():
    posts = [
        _post("old", "2020-01-01 00:00:00"),
        _post("new", "2024-06-01 12:00:00"),
        _post("mid", "2022-03-03 03:03:03"),
    ]
    sort_posts(posts)
    assert [p.metadata.slug for p in posts] == ["new", "mid", "old"]


def test_sort_posts_bad_date_raises():
    with pytest.raises(ValueError):
        sort_posts([_post("a", "yesterday"), _post("b", "2020-01-01 00:00:00")])


def test_empty_cache():
    cache = ContentCache()
    assert cache.get_about() is None
    assert cache.list_posts() == []
    assert cache.list_slugs() == []
    assert cache.get_post("anything") is None


def test_load_and_query(tmp_path):
    posts = [_post(f"post{i}", f"2024-01-{i + 1:02d} 00:00:00") for i in range(7)]
    about_file, blog = _write(tmp_path, posts)
    (blog / "readme.txt").write_text("ignored", encoding="utf-8")

    cache = ContentCache()
    cache.load(about_file, blog)

    assert cache.get_about() == _about()
    expected_order = [p.metadata.slug for p in reversed(posts)]
    assert cache.list_slugs() == expected_order
    assert [m.slug for m in cache.list_posts()] == expected_order
    homepage = cache.list_homepage_posts()
    assert len(homepage) == MAX_POSTS_PER_PAGE
    assert [m.slug for m in homepage] == expected_order[:MAX_POSTS_PER_PAGE]
    assert cache.get_post("post3") == posts[3]
    assert cache.get_post("missing") is None


def test_returned_values_are_copies(tmp_path):
    about_file, blog = _write(tmp_path, [_post("a", "2024-01-01 00:00:00")])
    cache = ContentCache()
    cache.load(about_file, blog)
    cache.list_posts()[0].title = "changed"
    assert cache.list_posts()[0].title == "A"


def test_missing_about_file_raises(tmp_path):
    blog = tmp_path / "blog"
    blog.mkdir()
    with pytest.raises(CacheError, match="Failed to read About file"):
        ContentCache().load(tmp_path / "nope.json", blog)


def test_bad_about_json_raises(tmp_path):
    about_file = tmp_path / "about.json"
    about_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(CacheError, match="Failed to parse About JSON"):
        ContentCache().load(about_file, tmp_path)


def test_bad_post_json_raises(tmp_path):
    about_file, blog = _write(tmp_path, [])
    (blog / "broken.json").write_text('{"content": "x"}', encoding="utf-8")
    with pytest.raises(CacheError, match="Failed to parse JSON"):
        ContentCache().load(about_file, blog)


def test_missing_blog_dir_raises(tmp_path):
    about_file, _ = _write(tmp_path, [])
    with pytest.raises(CacheError):
        ContentCache().load(about_file, tmp_path / "absent")