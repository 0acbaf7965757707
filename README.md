# dandesite

A small personal blog site. Posts and an about page are written in Markdown
with a YAML front matter block. A generator turns them into JSON documents,
and a server loads that JSON and serves HTML pages: a home page with the
latest writing (`/`), a list of all posts (`/blog`), one page per post
(`/blog/<slug>`) and an about page (`/about`).

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Where content lives

All locations are relative to the project root, which is the value of the
`DANDESITE_ROOT` environment variable when it is set, and otherwise the
directory that contains the `dandesite` package (see `dandesite.paths`):

| What                    | Location                                  |
|-------------------------|-------------------------------------------|
| Post sources            | `domain/src/data/blog/*.md`               |
| About page source       | `domain/src/data/about/default.md`        |
| Generated posts         | `.data/blog/<slug>.json`                  |
| Generated about page    | `.data/about/default.json`                |
| Highlighting script     | `generator/process-rehype-prism-plus.mjs` |

## Writing content

Each post is a `.md` file. Its file name without `.md` becomes the post's
slug. The front matter holds:

```yaml
---
title: Hello
description: A first post
date: "2024-01-31 09:30:00"
tags: [rust, web]
draft: false
---
```

`title`, `description`, `date` and `tags` are required. `canonical_url` and
`last_modified` are optional. A post without `draft: false` counts as a draft
and is skipped with a message. Dates must have the form
`YYYY-MM-DD HH:MM:SS`. Posts are listed newest first, and the home page shows
the five latest.

Post Markdown supports footnotes, strikethrough, tables, task lists, bare URL
links, smart punctuation, and heading attributes such as `## Intro {#intro .lead}`.
Code blocks without a language get `language-js`. Every block is wrapped in
`<div class="relative">`. A block opened with ` ```rust:src/main.rs ` gets
`src/main.rs` as a caption above it. In a caption such as
`css:red.css(ketchup_sauce)`, the text in parentheses is set off by a space and
its underscores become spaces. These steps are in `dandesite.html_transforms`:
`add_default_language`, `add_relative_div` and `add_gfm_code_title`.

After that, the HTML goes through `node` running the highlighting script
(`dandesite.prism.process_html_with_prism`). If Node.js or the script is
missing, or the script fails, a warning goes to stderr and the unhighlighted
HTML is kept.

The about page is one Markdown file. Its front matter holds `name`,
`occupation`, `company`, `email`, `avatar_image`, `github_url`,
`linkedin_url` and `twitter_url`, all as strings.

## Generating

```
dandesite-generate [--blog-src DIR] [--blog-out DIR] [--about-src FILE] [--about-out DIR]
```

The command writes one JSON file per published post and one for the about
page. Without options it uses the locations above. It exits with status 1
when a file cannot be read or written, or when front matter is missing or
malformed.

## Serving

```
dandesite [--host 127.0.0.1] [--port 8080] [--site-root target/site] [--about-file FILE] [--blog-dir DIR]
```

The command proceeds as follows:

1. It loads the generated JSON. If that fails, it prints
   `Failed to initialize blog cache: ...` and carries on with no content.
2. It writes every page as HTML under the site root (`index.html`,
   `about.html`, `blog.html`, `blog/<slug>.html`).
3. It serves the site over HTTP until interrupted.

Paths that match a route are rendered from the loaded content. Any other path
is served as a file from the site root, if one exists there. Everything else
gets "Page not found." with status 404. A missing post also gets a 404 error
page. Responses are compressed with Brotli when the client's
`Accept-Encoding` allows `br`.

## Using it from Python

```python
from pathlib import Path

from dandesite.app import resolve, shell
from dandesite.content_cache import ContentCache
from dandesite.generator import generate_about, generate_posts

posts = generate_posts(Path("posts"), Path("out/blog"), highlighter=lambda html: html)
generate_about(Path("out/about"), Path("about.md"))

cache = ContentCache()
cache.load(Path("out/about/default.json"), Path("out/blog"))
for metadata in cache.list_homepage_posts():
    print(metadata.slug, metadata.title)

html = shell(resolve(cache, "/blog"))
```

The modules are organised as follows:

- `generator`: `split_front_matter`, `render_post_markdown` and
  `render_about_markdown` for single documents.
- `content_cache.ContentCache`: `get_about`, `list_posts`, `list_slugs` and
  `get_post`.
- `pages`: each page as a `Page` holding body, title, meta tags, stylesheets
  and status.
- `app`: `static_routes`, `generate_static_site`, `make_handler` (for your own
  `http.server`) and `compress_response`.

Site-wide identity (author, title, links) is `SITE_METADATA` in
`dandesite.site_data`. Its values are placeholders at `example.com`, so edit
them for a real site.

## What it does not do

- It does not ship the Prism highlighting script, the site stylesheet
  (`/pkg/dande_dev.css`), `/styles/prism.css`, favicons or images. Pages link
  to them, so place them under the site root yourself.
- Pages carry no client-side code apart from a small inline script that applies
  the stored light or dark theme. The theme switcher button is rendered
  disabled, and the mobile menu button does not open a menu.
- There is no search, no tag pages and no live reloading of content. Run the
  generator and restart the server to pick up changes.