"""Build-time generation of post and about JSON from Markdown sources."""

from __future__ import annotations

import argparse
import html as _html
import json
import re
import sys
from collections.abc import Callable, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import mistune
import yaml

from dandesite.constants import ABOUT_OUT_FILENAME
from dandesite.html_transforms import (
    add_default_language,
    add_gfm_code_title,
    add_relative_div,
)
from dandesite.models import (
    About,
    AboutFrontMatter,
    AboutMetadata,
    Post,
    PostFrontMatter,
    PostMetadata,
)
from dandesite.paths import (
    absolute_about_out_dir,
    absolute_about_src_filename,
    absolute_blog_out_dir,
    absolute_blog_src_dir,
)
from dandesite.prism import PrismError, process_html_with_prism

_DELIMITER = "---"
_HEADING_ATTRS_RE = re.compile(r"\s*\{([^{}]*)\}\s*$")
_OPENING_CONTEXT = "([{-\u2014\u2013"


class FrontMatterError(ValueError):
    """A Markdown source has missing or malformed front matter."""


def split_front_matter(text: str) -> tuple[dict[str, Any] | None, str]:
    """Split YAML front matter delimited by ``---`` lines from the body.

    Returns ``(None, text)`` when the text has no front matter.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != _DELIMITER:
        return None, text

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == _DELIMITER:
            break
    else:
        raise FrontMatterError("front matter is not closed")

    raw = "".join(lines[1:index])
    body = "".join(lines[index + 1 :])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"invalid front matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("front matter must be a mapping")
    return data, body


def _smarten(text: str) -> str:
    text = text.replace("...", "\u2026")
    text = text.replace("---", "\u2014").replace("--", "\u2013")
    out: list[str] = []
    previous = ""
    for char in text:
        if char in "\"'":
            opening = not previous or previous.isspace() or previous in _OPENING_CONTEXT
            if char == '"':
                char = "\u201c" if opening else "\u201d"
            else:
                char = "\u2018" if opening else "\u2019"
        out.append(char)
        previous = char
    return "".join(out)


def _heading_attributes(spec: str) -> str:
    identifier = None
    classes: list[str] = []
    others: list[tuple[str, str]] = []
    for item in spec.split():
        if item.startswith("#") and len(item) > 1:
            identifier = item[1:]
        elif item.startswith(".") and len(item) > 1:
            classes.append(item[1:])
        elif "=" in item:
            key, _, value = item.partition("=")
            others.append((key, value))
    parts = []
    if identifier is not None:
        parts.append(f' id="{_html.escape(identifier)}"')
    if classes:
        parts.append(f' class="{_html.escape(" ".join(classes))}"')
    parts.extend(f' {_html.escape(k)}="{_html.escape(v)}"' for k, v in others)
    return "".join(parts)


class _Renderer(mistune.HTMLRenderer):
    """HTML renderer with optional smart punctuation and heading attributes."""

    def __init__(self, smart: bool) -> None:
        super().__init__(escape=False)
        self._smart = smart

    def text(self, text: str) -> str:
        if self._smart:
            text = _smarten(text)
        return super().text(text)

    def heading(self, text: str, level: int, **attrs: Any) -> str:
        extra = ""
        match = _HEADING_ATTRS_RE.search(text)
        if match:
            extra = _heading_attributes(match.group(1))
            text = text[: match.start()]
        return f"<h{level}{extra}>{text}</h{level}>\n"


@lru_cache(maxsize=None)
def _post_markdown() -> mistune.Markdown:
    return mistune.create_markdown(
        renderer=_Renderer(smart=True),
        plugins=["footnotes", "strikethrough", "table", "task_lists", "url"],
    )


@lru_cache(maxsize=None)
def _about_markdown() -> mistune.Markdown:
    return mistune.create_markdown(renderer=_Renderer(smart=False))


def render_post_markdown(text: str) -> str:
    """Render post Markdown with GFM extensions and smart punctuation."""
    return _post_markdown()(text)


def render_about_markdown(text: str) -> str:
    """Render about-page Markdown with heading attributes only."""
    return _about_markdown()(text)


def generate_about(out_path: str | Path, src_file: str | Path | None = None) -> Path:
    """Render the about page source to JSON in *out_path*; return the file written."""
    out_dir = Path(out_path)
    out_dir.mkdir(parents=True, exist_ok=True)
    source = Path(src_file) if src_file is not None else absolute_about_src_filename()
    content = source.read_text(encoding="utf-8")

    data, body = split_front_matter(content)
    if data is None:
        raise FrontMatterError(f"{source}: no front matter")
    try:
        front_matter = AboutFrontMatter.from_mapping(data)
    except ValueError as exc:
        raise FrontMatterError(f"{source}: {exc}") from exc

    about = About(
        content=render_about_markdown(body),
        metadata=AboutMetadata.from_front_matter(front_matter),
    )
    target = out_dir / ABOUT_OUT_FILENAME
    target.write_text(
        json.dumps(about.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    return target


def _render_post(path: Path, highlighter: Callable[[str], str]) -> Post | None:
    slug = path.name.replace(".md", "")
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    data, body = split_front_matter(content)
    if data is None:
        raise FrontMatterError(f"{path}: no front matter")
    try:
        front_matter = PostFrontMatter.from_mapping(data)
    except ValueError as exc:
        raise FrontMatterError(f"{path}: {exc}") from exc

    if front_matter.draft:
        print(f"Skipping draft post: {slug}")
        return None

    rendered = add_gfm_code_title(
        add_relative_div(add_default_language(render_post_markdown(body)))
    )
    try:
        highlighted = highlighter(rendered)
    except PrismError as exc:
        print(
            f"Warning: Failed to process HTML with Prism for {slug}: {exc}",
            file=sys.stderr,
        )
        highlighted = rendered

    return Post(content=highlighted, metadata=PostMetadata.from_front_matter(front_matter, slug))


def generate_posts(
    src_path: str | Path,
    out_path: str | Path,
    highlighter: Callable[[str], str] | None = None,
) -> list[Post]:
    """Render every published ``.md`` post in *src_path* to JSON in *out_path*.

    Drafts are skipped. The highlighter defaults to the Prism process; when it
    raises :class:`PrismError` the unhighlighted HTML is kept.
    """
    src_dir = Path(src_path)
    out_dir = Path(out_path)
    out_dir.mkdir(parents=True, exist_ok=True)
    highlight = highlighter if highlighter is not None else process_html_with_prism

    sources = sorted(p for p in src_dir.iterdir() if p.is_file() and p.suffix == ".md")
    posts = [post for post in (_render_post(p, highlight) for p in sources) if post]

    for post in posts:
        target = out_dir / f"{post.metadata.slug}.json"
        target.write_text(
            json.dumps(post.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8"
        )
    return posts


def build() -> None:
    """Generate posts and the about page at the project's standard locations."""
    blog_out_dir = absolute_blog_out_dir()
    print(f"Attempting to access: {blog_out_dir}")
    generate_posts(absolute_blog_src_dir(), blog_out_dir)

    about_out_dir = absolute_about_out_dir()
    print(f"Attempting to access: {about_out_dir}")
    generate_about(about_out_dir)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate site content JSON.")
    parser.add_argument("--blog-src", type=Path, default=None)
    parser.add_argument("--blog-out", type=Path, default=None)
    parser.add_argument("--about-src", type=Path, default=None)
    parser.add_argument("--about-out", type=Path, default=None)
    args = parser.parse_args(argv)

    blog_src = args.blog_src or absolute_blog_src_dir()
    blog_out = args.blog_out or absolute_blog_out_dir()
    about_out = args.about_out or absolute_about_out_dir()
    try:
        print(f"Attempting to access: {blog_out}")
        generate_posts(blog_src, blog_out)
        print(f"Attempting to access: {about_out}")
        generate_about(about_out, args.about_src)
    except (OSError, FrontMatterError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0