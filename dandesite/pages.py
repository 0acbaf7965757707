"""Site pages rendered as HTML fragments with their head metadata."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from html import escape

from dandesite.components import tag
from dandesite.content_cache import ContentCache
from dandesite.errors import (
    AboutServerError,
    PostNotFoundError,
    PostServerError,
)
from dandesite.formatting import format_post_date
from dandesite.icons import SocialIconKind, SocialIconSize, social_icon
from dandesite.models import About, Post, PostMetadata
from dandesite.site_data import HOMEPAGE_INTRO, SITE_METADATA

NOT_FOUND = 404
PRISM_STYLESHEET = "/styles/prism.css"

_READ_LINK_CLASS = (
    "inline-flex items-center text-sm transition-colors text-slate-600 group "
    "dark:text-slate-400 dark:hover:text-slate-100 hover:text-slate-900"
)
_ARROW_RIGHT_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="1em" height="1em" viewBox="0 0 24 24" '
    'fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" '
    'stroke-linejoin="round" class="ml-1 size-4 transition-transform '
    'group-hover:translate-x-0.5"><path d="M5 12h14"/><path d="m12 5 7 7-7 7"/></svg>'
)


@dataclass(frozen=True)
class MetaTag:
    """A ``<meta>`` element keyed by either ``name`` or ``property``."""

    content: str
    name: str | None = None
    property: str | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.property is None):
            raise ValueError("a meta tag needs exactly one of name or property")

    def __str__(self) -> str:
        key = "name" if self.name is not None else "property"
        value = self.name if self.name is not None else self.property
        return f'<meta {key}="{escape(value)}" content="{escape(self.content)}"/>'


@dataclass
class Page:
    """A rendered page: body HTML plus what belongs in the document head."""

    body: str
    title: str | None = None
    meta: list[MetaTag] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=list)
    status: int = 200


def _listing_meta(description: str, title: str, url: str) -> list[MetaTag]:
    return [
        MetaTag(name="description", content=description),
        MetaTag(property="og:title", content=title),
        MetaTag(property="og:type", content="website"),
        MetaTag(property="og:url", content=url),
        MetaTag(name="twitter:description", content=description),
        MetaTag(name="twitter:title", content=title),
    ]


def app_layout(children: str) -> str:
    """Centre the page content in a full-height column."""
    return (
        '<div class="px-4 mx-auto max-w-3xl sm:px-6 xl:px-0 xl:max-w-5xl">'
        f'<div class="flex flex-col justify-between h-screen">{children}</div>'
        "</div>"
    )


def error_view(errors: Iterable[BaseException]) -> str:
    """List the messages of *errors* under a generic heading."""
    items = "".join(f"<li>{escape(str(error))}</li>" for error in errors)
    return (
        '<div class="error"><h1>Something went wrong.</h1>'
        f"<ul>{items}</ul></div>"
    )


# ===== About ===== #
def _about_social_links() -> str:
    links = (
        (SocialIconKind.EMAIL, SITE_METADATA.mail_to),
        (SocialIconKind.GITHUB, SITE_METADATA.github_url),
        (SocialIconKind.LINKEDIN, SITE_METADATA.linkedin_url),
        (SocialIconKind.TWITTER, SITE_METADATA.twitter_url),
    )
    return "".join(social_icon(href, kind, SocialIconSize.SM) for kind, href in links)


def about_layout(about: About) -> Page:
    """The about page with profile card and rendered content."""
    title = f"About | {SITE_METADATA.title}"
    info = about.metadata
    body = (
        '<div class="px-4 mx-auto max-w-4xl sm:px-6 xl:px-0">'
        '<div class="pt-16 pb-12 space-y-8">'
        '<div class="space-y-2">'
        '<h1 class="text-2xl font-bold sm:text-4xl text-slate-900 dark:text-slate-100">'
        "About</h1></div>"
        '<div class="grid gap-12 pt-4 md:grid-cols-7">'
        '<div class="flex gap-8 items-start md:flex-col md:col-span-2">'
        '<div class="overflow-hidden rounded-lg bg-slate-100 w-37.5 lg:w-50 dark:bg-slate-800">'
        f'<img alt="avatar" class="object-cover size-full" src="{escape(info.avatar_image)}"/>'
        "</div>"
        '<div class="space-y-4"><div class="space-y-2">'
        '<h2 class="text-2xl font-semibold text-slate-900 dark:text-slate-100">'
        f"{escape(info.name)}</h2>"
        '<div class="space-y-1">'
        '<p class="font-mono text-sm uppercase text-slate-600 dark:text-slate-400">'
        f"{escape(info.occupation)}</p>"
        '<p class="font-mono text-sm uppercase text-slate-600 dark:text-slate-400">'
        f"{escape(info.company)}</p>"
        "</div></div>"
        f'<div class="flex gap-4">{_about_social_links()}</div>'
        "</div></div>"
        '<div class="max-w-none md:col-span-5 prose prose-slate dark:prose-invert">'
        f"{about.content}</div>"
        "</div></div></div>"
    )
    meta = _listing_meta(
        SITE_METADATA.description, title, f"{SITE_METADATA.site_url}/about"
    )
    return Page(body=body, title=title, meta=meta)


def about_not_found() -> Page:
    """Shown when no about content has been loaded."""
    body = (
        '<div class="prose dark:prose-invert">'
        "<h1>About Page Uninitialized</h1>"
        "<p>Sorry, the about page content was not found.</p>"
        "</div>"
    )
    return Page(body=body, title=f"About | {SITE_METADATA.title}")


def about_page(cache: ContentCache) -> Page:
    """The about page, its placeholder, or an error view if loading fails."""
    try:
        about = cache.get_about()
    except Exception as exc:  # any failure of the lookup is a server error
        error = AboutServerError(str(exc))
        return Page(body=error_view([error]), status=NOT_FOUND)
    if about is None:
        return about_not_found()
    return about_layout(about)


# ===== Post listings ===== #
def _post_item(
    post: PostMetadata,
    *,
    li_class: str,
    info_class: str,
    heading: str,
    link_class: str | None,
    description_class: str,
) -> str:
    href = escape(f"/blog/{post.slug}")
    title = escape(post.title)
    link_attr = f' class="{link_class}"' if link_class else ""
    tags = "".join(tag(name) for name in post.tags)
    return (
        f'<li class="{li_class}"><article><div class="space-y-8">'
        '<div class="space-y-4">'
        f'<div class="{info_class}">'
        f'<time datetime="{escape(post.date)}">{escape(format_post_date(post.date))}</time>'
        f'<{heading} class="text-2xl font-semibold text-slate-900 dark:text-slate-100">'
        f'<a{link_attr} href="{href}">{title}</a></{heading}>'
        f'<div class="flex flex-wrap gap-2">{tags}</div>'
        "</div>"
        f'<p class="{description_class}">{escape(post.description)}</p>'
        "</div>"
        f'<a aria-label="Read {title}" class="{_READ_LINK_CLASS}" href="{href}">'
        f"Read article{_ARROW_RIGHT_ICON}</a>"
        "</div></article></li>"
    )


def blog_page(cache: ContentCache) -> Page:
    """All published posts, newest first."""
    title = f"Blog | {SITE_METADATA.title}"
    items = "".join(
        _post_item(
            post,
            li_class="py-12 first:pt-0",
            info_class="flex flex-col gap-4 text-sm text-slate-500 dark:text-slate-300",
            heading="h2",
            link_class=None,
            description_class="text-slate-600 dark:text-slate-300",
        )
        for post in cache.list_posts()
    )
    body = (
        '<div class="px-4 mx-auto max-w-4xl sm:px-6 xl:px-0">'
        '<div class="pt-16 pb-12 space-y-8">'
        '<div class="space-y-2">'
        '<h1 class="text-3xl font-bold sm:text-4xl text-slate-900 dark:text-slate-100">'
        "All Posts</h1></div>"
        '<div class="flex flex-col gap-8 md:flex-row"><div class="flex-1 min-w-0">'
        f'<ul class="divide-y divide-slate-200 dark:divide-slate-800">{items}</ul>'
        "</div></div></div></div>"
    )
    meta = _listing_meta(title, title, f"{SITE_METADATA.site_url}/blog")
    return Page(body=body, title=title, meta=meta)


def home_page(cache: ContentCache) -> Page:
    """Introduction followed by the latest posts."""
    items = "".join(
        _post_item(
            post,
            li_class="py-12",
            info_class="flex flex-col gap-4 text-sm text-slate-500 dark:text-slate-400",
            heading="h3",
            link_class="break-words",
            description_class="max-w-4xl text-slate-600 dark:text-slate-400",
        )
        for post in cache.list_homepage_posts()
    )
    body = (
        '<div class="flex flex-col gap-x-12 my-6 lg:flex-row lg:mb-12">'
        '<div class="flex flex-col justify-start items-start space-y-6 md:flex-row '
        'md:justify-center md:items-center md:mt-24 md:space-x-6 md:divide-y-0">'
        '<div class="space-y-4 md:border-r-2 md:border-slate-200 dark:md:border-slate-700">'
        '<h1 class="text-3xl font-bold sm:text-4xl text-slate-900 dark:text-slate-100">'
        f"{escape(SITE_METADATA.author)}</h1>"
        '<p class="mr-2 text-sm tracking-wider uppercase md:w-96 text-primary-500">'
        f"{escape(SITE_METADATA.description)}</p>"
        "</div>"
        '<div class="space-y-4 max-w-xl text-slate-600 dark:text-slate-400">'
        f"{HOMEPAGE_INTRO}</div>"
        "</div></div>"
        '<div class="divide-y divide-slate-200 dark:divide-slate-700">'
        '<div class="pt-6 pb-8 space-y-2 md:space-y-5">'
        '<h2 class="font-mono text-sm tracking-wider uppercase text-slate-500 '
        'dark:text-slate-400">Latest Writing</h2></div>'
        f'<ul class="divide-y divide-slate-200 dark:divide-slate-700">{items}</ul>'
        "</div>"
    )
    meta = _listing_meta(SITE_METADATA.description, SITE_METADATA.title, SITE_METADATA.site_url)
    return Page(body=body, title=SITE_METADATA.title, meta=meta)


# ===== Post ===== #
def post_layout(post: Post) -> Page:
    """A single post with its title and rendered content."""
    info = post.metadata
    title = f"{info.title} | {SITE_METADATA.title}"
    meta = [
        MetaTag(name="description", content=info.description),
        MetaTag(property="og:title", content=title),
        MetaTag(property="og:type", content="article"),
        MetaTag(property="og:url", content=f"{SITE_METADATA.site_url}/blog/{info.slug}"),
        MetaTag(name="twitter:description", content=info.description),
        MetaTag(name="twitter:title", content=title),
    ]
    body = (
        '<div class="pt-10 pb-8 max-w-none prose dark:prose-invert">'
        f"<h1>{escape(info.title)}</h1>"
        f"<div>{post.content}</div>"
        "</div>"
    )
    return Page(body=body, title=title, meta=meta)


def post_page(cache: ContentCache, slug: str | None) -> Page:
    """The post named by *slug*, or an error view with a not-found status."""
    try:
        post = cache.get_post(slug or "")
    except Exception as exc:  # any failure of the lookup is a server error
        error: Exception = PostServerError(str(exc))
    else:
        if post is not None:
            page = post_layout(post)
            page.stylesheets.insert(0, PRISM_STYLESHEET)
            return page
        error = PostNotFoundError()
    wrapped = error if isinstance(error, PostServerError) else PostServerError(str(error))
    return Page(
        body=error_view([wrapped]),
        stylesheets=[PRISM_STYLESHEET],
        status=NOT_FOUND,
    )