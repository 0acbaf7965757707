"""The site application: document shell, routing, static generation and serving."""

from __future__ import annotations

import argparse
import mimetypes
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from html import escape
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import unquote, urlsplit

import brotli

from dandesite.components import footer, header
from dandesite.content_cache import CacheError, ContentCache
from dandesite.pages import (
    NOT_FOUND,
    MetaTag,
    Page,
    about_page,
    app_layout,
    blog_page,
    home_page,
    post_page,
)
from dandesite.site_data import SITE_METADATA

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_SITE_ROOT = "target/site"
SITE_STYLESHEET = "/pkg/dande_dev.css"
FALLBACK_TEXT = "Page not found."

_THEME_SCRIPT = (
    "(function() {"
    'if (!window.localStorage.getItem("theme")) {'
    'window.localStorage.setItem("theme", "dark");'
    "}"
    'if (window.localStorage.getItem("theme") === "light") {'
    'document.querySelector("html").classList.remove("dark");'
    'document.querySelector("html").style.colorScheme = "light";'
    "} else {"
    'document.querySelector("html").classList.add("dark");'
    'document.querySelector("html").style.colorScheme = "dark";'
    "}"
    "})();"
)

_HEAD_LINKS = (
    '<link rel="apple-touch-icon" sizes="180x180" href="/favicons/apple-touch-icon.png"/>'
    '<link rel="icon" type="image/png" sizes="32x32" href="/favicons/favicon-32x32.png"/>'
    '<link rel="icon" type="image/png" sizes="16x16" href="/favicons/favicon-16x16.png"/>'
    '<link rel="manifest" href="/favicons/site.webmanifest"/>'
    '<link rel="shortcut icon" type="image/x-icon" href="/favicons/favicon.ico"/>'
)


@dataclass(frozen=True)
class Route:
    """A URL pattern whose ``:name`` segments capture path parameters."""

    pattern: str

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(s for s in self.pattern.split("/") if s)

    @property
    def is_static(self) -> bool:
        return not any(s.startswith(":") for s in self.segments)

    def match(self, path: str) -> dict[str, str] | None:
        """Return the captured parameters when *path* fits the pattern."""
        parts = [s for s in path.split("/") if s]
        if len(parts) != len(self.segments):
            return None
        params: dict[str, str] = {}
        for expected, actual in zip(self.segments, parts):
            if expected.startswith(":"):
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params

    def fill(self, **params: str) -> str:
        """Build a concrete path from the pattern and *params*."""
        filled = [
            params[s[1:]] if s.startswith(":") else s for s in self.segments
        ]
        return "/" + "/".join(filled)


ROUTES: tuple[Route, ...] = (
    Route("/"),
    Route("/about"),
    Route("/blog"),
    Route("/blog/:slug"),
)


def _app_meta() -> str:
    image = f"{SITE_METADATA.site_url}{SITE_METADATA.opengraph_image}"
    tags = [
        '<meta name="color-scheme" content="dark light"/>',
        '<meta name="theme-color" media="(prefers-color-scheme: light)" content="#fff"/>',
        '<meta name="theme-color" media="(prefers-color-scheme: dark)" content="#000"/>',
        str(MetaTag(property="og:description", content=SITE_METADATA.description)),
        str(MetaTag(property="og:image", content=image)),
        str(MetaTag(property="og:locale", content=SITE_METADATA.locale)),
        str(MetaTag(property="og:site_name", content=SITE_METADATA.title)),
        str(MetaTag(name="twitter:card", content="summary_large_image")),
        str(MetaTag(name="twitter:image", content=image)),
        f'<link rel="canonical" href="{escape(SITE_METADATA.site_url)}"/>',
    ]
    return "".join(tags)


def shell(page: Page, year: int | None = None) -> str:
    """Wrap *page* in the full HTML document with head, header and footer."""
    title = f"<title>{escape(page.title)}</title>" if page.title is not None else ""
    page_meta = "".join(str(tag) for tag in page.meta)
    stylesheets = "".join(
        f'<link rel="stylesheet" href="{escape(href)}"/>' for href in page.stylesheets
    )
    content = f'{header()}<main class="mb-auto">{page.body}</main>{footer(year)}'
    return (
        "<!DOCTYPE html>"
        f'<html lang="{escape(SITE_METADATA.language)}" class="scroll-smooth">'
        "<head>"
        '<meta charset="utf-8"/>'
        '<meta name="viewport" content="width=device-width, initial-scale=1"/>'
        f"{title}{_HEAD_LINKS}"
        f'<link rel="author" href="{escape(SITE_METADATA.github_url)}"/>'
        f"{MetaTag(name='author', content=SITE_METADATA.author)}"
        f'<link id="leptos" rel="stylesheet" href="{SITE_STYLESHEET}"/>'
        f"{stylesheets}{_app_meta()}{page_meta}"
        f"<script>{_THEME_SCRIPT}</script>"
        "</head>"
        '<body class="antialiased text-black bg-white dark:text-white '
        'pl-[calc(100vw-100%)] dark:bg-slate-950">'
        f"{app_layout(content)}"
        "</body></html>"
    )


def _match(path: str) -> tuple[Route, dict[str, str]] | None:
    for route in ROUTES:
        params = route.match(path)
        if params is not None:
            return route, params
    return None


def resolve(cache: ContentCache, path: str) -> Page:
    """Render the page for *path*, or the not-found fallback."""
    matched = _match(path)
    if matched is None:
        return Page(body=FALLBACK_TEXT, status=NOT_FOUND)
    route, params = matched
    if route.pattern == "/":
        return home_page(cache)
    if route.pattern == "/about":
        return about_page(cache)
    if route.pattern == "/blog":
        return blog_page(cache)
    return post_page(cache, params.get("slug"))


def static_routes(cache: ContentCache) -> list[str]:
    """Every path rendered ahead of time, posts newest first."""
    paths: list[str] = []
    for route in ROUTES:
        if route.is_static:
            paths.append(route.fill())
        else:
            paths.extend(route.fill(slug=slug) for slug in cache.list_slugs())
    return paths


def _output_file(site_root: Path, path: str) -> Path:
    relative = path.strip("/")
    return site_root / ("index.html" if not relative else f"{relative}.html")


def generate_static_site(cache: ContentCache, site_root: str | Path) -> list[Path]:
    """Write the HTML of every static route under *site_root*; return the files."""
    root = Path(site_root)
    written: list[Path] = []
    for path in static_routes(cache):
        target = _output_file(root, path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(shell(resolve(cache, path)), encoding="utf-8")
        written.append(target)
    return written


def _accepts_brotli(accept_encoding: str | None) -> bool:
    if not accept_encoding:
        return False
    for item in accept_encoding.split(","):
        coding, _, params = item.strip().partition(";")
        if coding.strip().lower() not in ("br", "*"):
            continue
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            return True
    return False


def compress_response(body: bytes, accept_encoding: str | None) -> tuple[bytes, str | None]:
    """Brotli-compress *body* when the client accepts it.

    Returns the body to send and the content encoding, or ``None`` when the
    body is sent as is.
    """
    if not body or not _accepts_brotli(accept_encoding):
        return body, None
    return brotli.compress(body), "br"


def _static_file(root: Path | None, path: str) -> Path | None:
    if root is None:
        return None
    candidate = (root / path.lstrip("/")).resolve()
    try:
        candidate.relative_to(root)
    except ValueError:
        return None
    return candidate if candidate.is_file() else None


def make_handler(
    cache: ContentCache, site_root: str | Path | None = None
) -> type[BaseHTTPRequestHandler]:
    """Build a request handler serving routed pages, then files from *site_root*."""
    root = Path(site_root).resolve() if site_root is not None else None

    class SiteHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            self._respond(send_body=True)

        def do_HEAD(self) -> None:
            self._respond(send_body=False)

        def _respond(self, send_body: bool) -> None:
            path = unquote(urlsplit(self.path).path) or "/"
            static = None if _match(path) is not None else _static_file(root, path)
            if static is not None:
                status = 200
                body = static.read_bytes()
                content_type = mimetypes.guess_type(static.name)[0] or "application/octet-stream"
            else:
                page = resolve(cache, path)
                status = page.status
                body = shell(page).encode("utf-8")
                content_type = "text/html; charset=utf-8"

            payload, encoding = compress_response(body, self.headers.get("Accept-Encoding"))
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(payload)))
            self.send_header("Vary", "Accept-Encoding")
            if encoding is not None:
                self.send_header("Content-Encoding", encoding)
            self.end_headers()
            if send_body:
                self.wfile.write(payload)

    return SiteHandler


def serve(
    host: str,
    port: int,
    cache: ContentCache,
    site_root: str | Path | None = None,
) -> None:
    """Serve the site until interrupted."""
    with ThreadingHTTPServer((host, port), make_handler(cache, site_root)) as server:
        print(f"listening on http://{host}:{port}")
        server.serve_forever()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the site.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--site-root", type=Path, default=Path(DEFAULT_SITE_ROOT))
    parser.add_argument("--about-file", type=Path, default=None)
    parser.add_argument("--blog-dir", type=Path, default=None)
    args = parser.parse_args(argv)

    cache = ContentCache()
    try:
        cache.load(args.about_file, args.blog_dir)
    except CacheError as exc:
        print(f"Failed to initialize blog cache: {exc}", file=sys.stderr)

    generate_static_site(cache, args.site_root)
    try:
        serve(args.host, args.port, cache, args.site_root)
    except KeyboardInterrupt:
        pass
    return 0