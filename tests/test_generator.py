import json
from unittest.mock import patch

import pytest

from dandesite.generator import (
    FrontMatterError,
    build,
    generate_about,
    generate_posts,
    main,
    render_about_markdown,
    render_post_markdown,
    split_front_matter,
)
from dandesite.models import About, Post
from dandesite.paths import absolute_about_out_filename, absolute_blog_out_dir
from dandesite.prism import PrismError

ABOUT_SOURCE = """---
avatar_image: /images/avatar.png
company: Example Co
email: author@example.com
github_url: https://example.com/github
linkedin_url: https://example.com/linkedin
name: Site Author
occupation: Engineer
twitter_url: https://example.com/twitter
---
# Hello

Some text.
"""


def _post_source(title, date, draft=False, body="Body text."):
    draft_line = "draft: false\n" if not draft else "draft: true\n"
    return (
        "---\n"
        f"title: {title}\n"
        f"date: '{date}'\n"
        "description: A description\n"
        "tags:\n  - rust\n  - web\n"
        f"{draft_line}"
        "---\n"
        f"{body}\n"
    )


def _identity(html):
    return html


def test_split_front_matter():
    data, body = split_front_matter("---\ntitle: Hi\n---\nBody\n")
    assert data == {"title": "Hi"}
    assert body == "Body\n"


def test_split_without_front_matter():
    assert split_front_matter("Just text") == (None, "Just text")


def test_split_unclosed_front_matter_raises():
    with pytest.raises(FrontMatterError):
        split_front_matter("---\ntitle: Hi\nBody\n")


def test_split_non_mapping_front_matter_raises():
    with pytest.raises(FrontMatterError):
        split_front_matter("---\n- a\n- b\n---\nBody\n")


def test_render_code_block_with_language():
    html = render_post_markdown("```rust\nfn main() {}\n```\n")
    assert '<pre><code class="language-rust">fn main() {}' in html


def test_render_smart_punctuation():
    html = render_post_markdown('He said "hi" -- ok...\n')
    assert "\u201chi\u201d" in html
    assert "\u2013" in html
    assert "\u2026" in html


def test_render_strikethrough():
    assert "<del>gone</del>" in render_post_markdown("~~gone~~\n")


def test_heading_attributes():
    html = render_about_markdown("# Title {#intro .lead}\n")
    assert '<h1 id="intro" class="lead">Title</h1>' in html


def test_about_has_no_smart_punctuation():
    html = render_about_markdown('say "hi"\n')
    assert "\u201c" not in html
    assert "hi" in html


def test_generate_about(tmp_path):
    src = tmp_path / "about.md"
    src.write_text(ABOUT_SOURCE, encoding="utf-8")
    out_dir = tmp_path / "out" / "about"
    target = generate_about(out_dir, src)
    assert target == out_dir / "default.json"
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["metadata"]["name"] == "Site Author"
    assert data["metadata"]["email"] == "author@example.com"
    assert "<h1>Hello</h1>" in data["content"]


def test_generate_about_without_front_matter_raises(tmp_path):
    src = tmp_path / "about.md"
    src.write_text("# Hello\n", encoding="utf-8")
    with pytest.raises(FrontMatterError):
        generate_about(tmp_path / "out", src)


def test_generate_about_missing_field_raises(tmp_path):
    src = tmp_path / "about.md"
    src.write_text("---\nname: Someone\n---\nText\n", encoding="utf-8")
    with pytest.raises(FrontMatterError):
        generate_about(tmp_path / "out", src)


def test_generate_posts_writes_json_and_skips_drafts(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "first.md").write_text(_post_source("First", "2024-01-02 03:04:05"), encoding="utf-8")
    (src / "draft.md").write_text(
        _post_source("Draft", "2024-01-02 03:04:05", draft=True), encoding="utf-8"
    )
    (src / "notes.txt").write_text("ignored", encoding="utf-8")
    out = tmp_path / "out"

    posts = generate_posts(src, out, highlighter=_identity)

    assert [p.metadata.slug for p in posts] == ["first"]
    assert sorted(p.name for p in out.iterdir()) == ["first.json"]
    data = json.loads((out / "first.json").read_text(encoding="utf-8"))
    assert data["metadata"]["title"] == "First"
    assert data["metadata"]["date"] == "2024-01-02 03:04:05"
    assert data["metadata"]["tags"] == ["rust", "web"]
    assert data["metadata"]["draft"] is False


def test_generate_posts_default_draft_is_skipped(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "x.md").write_text(
        "---\ntitle: X\ndate: '2024-01-02 03:04:05'\ndescription: d\ntags: []\n---\nBody\n",
        encoding="utf-8",
    )
    assert generate_posts(src, tmp_path / "out", highlighter=_identity) == []


def test_generate_posts_applies_code_transforms(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    body = "```rust:main.rs\nfn main() {}\n```\n\n```\nplain\n```"
    (src / "code.md").write_text(
        _post_source("Code", "2024-01-02 03:04:05", body=body), encoding="utf-8"
    )
    posts = generate_posts(src, tmp_path / "out", highlighter=_identity)
    content = posts[0].content
    assert '<div class="remark-code-title">main.rs</div>' in content
    assert '<div class="relative"><pre><code class="language-rust">' in content
    assert '<pre><code class="language-js">plain' in content


def test_generate_posts_uses_highlighter(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.md").write_text(_post_source("A", "2024-01-02 03:04:05"), encoding="utf-8")
    posts = generate_posts(src, tmp_path / "out", highlighter=lambda html: "HIGHLIGHTED")
    assert posts[0].content == "HIGHLIGHTED"


def test_generate_posts_falls_back_when_highlighting_fails(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "a.md").write_text(_post_source("A", "2024-01-02 03:04:05"), encoding="utf-8")

    def failing(html):
        raise PrismError("no node")

    posts = generate_posts(src, tmp_path / "out", highlighter=failing)
    assert "Body text." in posts[0].content


def test_generate_posts_bad_front_matter_raises(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "bad.md").write_text("no front matter\n", encoding="utf-8")
    with pytest.raises(FrontMatterError):
        generate_posts(src, tmp_path / "out", highlighter=_identity)


def _project(root):
    blog_src = root / "domain" / "src" / "data" / "blog"
    blog_src.mkdir(parents=True)
    (blog_src / "hello.md").write_text(_post_source("Hello", "2024-01-02 03:04:05"), encoding="utf-8")
    about_src = root / "domain" / "src" / "data" / "about"
    about_src.mkdir(parents=True)
    (about_src / "default.md").write_text(ABOUT_SOURCE, encoding="utf-8")


@patch("dandesite.prism.subprocess.run", side_effect=FileNotFoundError("node"))
def test_build_uses_project_root(run, tmp_path, monkeypatch):
    _project(tmp_path)
    monkeypatch.setenv("DANDESITE_ROOT", str(tmp_path))
    build()

    blog_out = absolute_blog_out_dir()
    assert blog_out == tmp_path / ".data" / "blog"
    post = Post.from_dict(json.loads((blog_out / "hello.json").read_text(encoding="utf-8")))
    assert post.metadata.title == "Hello"
    assert post.metadata.slug == "hello"

    about_file = absolute_about_out_filename()
    assert about_file == tmp_path / ".data" / "about" / "default.json"
    about = About.from_dict(json.loads(about_file.read_text(encoding="utf-8")))
    assert about.metadata.name == "Site Author"


@patch("dandesite.prism.subprocess.run", side_effect=FileNotFoundError("node"))
def test_main_with_explicit_paths(run, tmp_path):
    _project(tmp_path)
    code = main(
        [
            "--blog-src", str(tmp_path / "domain" / "src" / "data" / "blog"),
            "--blog-out", str(tmp_path / "out" / "blog"),
            "--about-src", str(tmp_path / "domain" / "src" / "data" / "about" / "default.md"),
            "--about-out", str(tmp_path / "out" / "about"),
        ]
    )
    assert code == 0
    assert (tmp_path / "out" / "blog" / "hello.json").is_file()
    assert (tmp_path / "out" / "about" / "default.json").is_file()


def test_main_reports_failure(tmp_path):
    code = main(
        [
            "--blog-src", str(tmp_path / "missing"),
            "--blog-out", str(tmp_path / "out"),
            "--about-out", str(tmp_path / "about"),
        ]
    )
    assert code == 1