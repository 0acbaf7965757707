"""Content models for the about page and blog posts."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from dandesite.constants import DATETIME_FORMAT


def _as_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    try:
        value = data[key]
    except KeyError:
        raise ValueError(f"missing field `{key}`") from None
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"field `{key}` must be a string or null")


def _date_text(value: Any, key: str) -> str:
    """Accept a string, or a date/datetime that YAML turned a string into."""
    if isinstance(value, str):
        return value
    if isinstance(value, _dt.datetime):
        return value.strftime(DATETIME_FORMAT)
    if isinstance(value, _dt.date):
        return value.isoformat()
    raise ValueError(f"field `{key}` must be a string")


def _require_date(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return _date_text(data[key], key)


def _optional_date(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else _date_text(value, key)


def _require_tags(data: Mapping[str, Any]) -> list[str]:
    if "tags" not in data:
        raise ValueError("missing field `tags`")
    tags = data["tags"]
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValueError("field `tags` must be a list of strings")
    return list(tags)


def _draft(data: Mapping[str, Any]) -> bool:
    draft = data.get("draft", True)
    if not isinstance(draft, bool):
        raise ValueError("field `draft` must be a boolean")
    return draft


# ===== About ===== #
@dataclass
class AboutFrontMatter:
    """Front matter of the about page source."""

    avatar_image: str
    company: str
    email: str
    github_url: str
    linkedin_url: str
    name: str
    occupation: str
    twitter_url: str

    @classmethod
    def from_mapping(cls, data: Any) -> AboutFrontMatter:
        data = _as_mapping(data, "about front matter")
        return cls(**{f.name: _require_str(data, f.name) for f in fields(cls)})


@dataclass
class AboutMetadata:
    """Profile data shown on the about page."""

    avatar_image: str
    company: str
    email: str
    github_url: str
    linkedin_url: str
    name: str
    occupation: str
    twitter_url: str

    @classmethod
    def from_front_matter(cls, front_matter: AboutFrontMatter) -> AboutMetadata:
        return cls(**{f.name: getattr(front_matter, f.name) for f in fields(cls)})

    @classmethod
    def from_dict(cls, data: Any) -> AboutMetadata:
        data = _as_mapping(data, "about metadata")
        return cls(**{f.name: _require_str(data, f.name) for f in fields(cls)})

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class About:
    """Rendered about page."""

    content: str
    metadata: AboutMetadata

    @classmethod
    def from_dict(cls, data: Any) -> About:
        data = _as_mapping(data, "about")
        if "metadata" not in data:
            raise ValueError("missing field `metadata`")
        return cls(
            content=_require_str(data, "content"),
            metadata=AboutMetadata.from_dict(data["metadata"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "metadata": self.metadata.to_dict()}


# ===== Post ===== #
@dataclass
class PostFrontMatter:
    """Front matter of a blog post source. Posts are drafts unless stated."""

    date: str
    description: str
    tags: list[str]
    title: str
    canonical_url: str | None = None
    draft: bool = True
    last_modified: str | None = None

    @classmethod
    def from_mapping(cls, data: Any) -> PostFrontMatter:
        data = _as_mapping(data, "post front matter")
        return cls(
            canonical_url=_optional_str(data, "canonical_url"),
            date=_require_date(data, "date"),
            description=_require_str(data, "description"),
            draft=_draft(data),
            last_modified=_optional_date(data, "last_modified"),
            tags=_require_tags(data),
            title=_require_str(data, "title"),
        )


@dataclass
class PostMetadata:
    """Metadata of a published post; the slug is its file name without `.md`."""

    date: str
    description: str
    tags: list[str]
    title: str
    slug: str
    canonical_url: str | None = None
    draft: bool = True
    last_modified: str | None = None

    @classmethod
    def from_front_matter(cls, front_matter: PostFrontMatter, slug: str) -> PostMetadata:
        return cls(
            canonical_url=front_matter.canonical_url,
            date=front_matter.date,
            description=front_matter.description,
            draft=front_matter.draft,
            last_modified=front_matter.last_modified,
            tags=list(front_matter.tags),
            title=front_matter.title,
            slug=slug,
        )

    @classmethod
    def from_dict(cls, data: Any) -> PostMetadata:
        data = _as_mapping(data, "post metadata")
        return cls(
            canonical_url=_optional_str(data, "canonical_url"),
            date=_require_str(data, "date"),
            description=_require_str(data, "description"),
            draft=_draft(data),
            last_modified=_optional_str(data, "last_modified"),
            tags=_require_tags(data),
            title=_require_str(data, "title"),
            slug=_require_str(data, "slug"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "canonical_url": self.canonical_url,
            "date": self.date,
            "description": self.description,
            "draft": self.draft,
            "last_modified": self.last_modified,
            "tags": list(self.tags),
            "title": self.title,
            "slug": self.slug,
        }


@dataclass
class Post:
    """A rendered blog post."""

    content: str
    metadata: PostMetadata = field()

    @classmethod
    def from_dict(cls, data: Any) -> Post:
        data = _as_mapping(data, "post")
        if "metadata" not in data:
            raise ValueError("missing field `metadata`")
        return cls(
            content=_require_str(data, "content"),
            metadata=PostMetadata.from_dict(data["metadata"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "metadata": self.metadata.to_dict()}