"""In-memory cache of generated about and post content."""

from __future__ import annotations

import copy
import json
import threading
from datetime import datetime
from pathlib import Path

from dandesite.constants import DATETIME_FORMAT, MAX_POSTS_PER_PAGE
from dandesite.models import About, Post, PostMetadata
from dandesite.paths import absolute_about_out_filename, absolute_blog_out_dir


class CacheError(RuntimeError):
    """Generated content could not be read or parsed."""


def sort_posts(posts: list[Post]) -> None:
    """Sort *posts* in place, newest first. Raises ValueError on a bad date."""
    posts.sort(
        key=lambda post: datetime.strptime(post.metadata.date, DATETIME_FORMAT),
        reverse=True,
    )


class ContentCache:
    """Holds the about page and posts loaded from generated JSON."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._about: About | None = None
        self._posts: dict[str, Post] = {}
        self._ordered: list[PostMetadata] = []
        self._homepage: list[PostMetadata] = []

    def load(self, about_file: str | Path | None = None, blog_dir: str | Path | None = None) -> None:
        """Read the about JSON and every post JSON file, replacing the cache."""
        about_path = Path(about_file) if about_file is not None else absolute_about_out_filename()
        try:
            text = about_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise CacheError(f"Failed to read About file: {exc}") from exc
        try:
            about = About.from_dict(json.loads(text))
        except ValueError as exc:
            raise CacheError(f"Failed to parse About JSON: {exc}") from exc
        with self._lock:
            self._about = about

        directory = Path(blog_dir) if blog_dir is not None else absolute_blog_out_dir()
        try:
            files = sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ".json")
        except OSError as exc:
            raise CacheError(f"Failed to read blog directory {directory}: {exc}") from exc

        posts: list[Post] = []
        for path in files:
            try:
                content = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise CacheError(f"Failed to read {path}: {exc}") from exc
            try:
                posts.append(Post.from_dict(json.loads(content)))
            except ValueError as exc:
                raise CacheError(f"Failed to parse JSON: {exc}") from exc

        try:
            sort_posts(posts)
        except ValueError as exc:
            raise CacheError(f"Invalid post date: {exc}") from exc

        ordered = [post.metadata for post in posts]
        with self._lock:
            self._ordered = ordered
            self._homepage = ordered[:MAX_POSTS_PER_PAGE]
            self._posts = {post.metadata.slug: post for post in posts}

    def get_about(self) -> About | None:
        with self._lock:
            return copy.deepcopy(self._about)

    def list_posts(self) -> list[PostMetadata]:
        with self._lock:
            return copy.deepcopy(self._ordered)

    def list_homepage_posts(self) -> list[PostMetadata]:
        with self._lock:
            return copy.deepcopy(self._homepage)

    def get_post(self, slug: str) -> Post | None:
        with self._lock:
            return copy.deepcopy(self._posts.get(slug))

    def list_slugs(self) -> list[str]:
        with self._lock:
            return [meta.slug for meta in self._ordered]