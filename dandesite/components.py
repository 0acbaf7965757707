"""Shared page components rendered as HTML fragments."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from html import escape

from dandesite.icons import SocialIconKind, SocialIconSize, moon_icon, social_icon, sun_icon
from dandesite.site_data import HEADER_NAV_LINKS, SITE_METADATA

_NAV_LINK_CLASS = (
    "block font-medium text-slate-900 dark:text-slate-100 "
    "dark:hover:text-primary-400 hover:text-primary-500"
)
_TOGGLE_CLASS = (
    "size-8 text-slate-900 dark:text-slate-100 "
    "dark:hover:text-primary-400 hover:text-primary-500"
)


class Theme(str, Enum):
    """Colour theme of the site; unknown until the stored choice is read."""

    DARK = "dark"
    LIGHT = "light"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    def toggled(self) -> Theme:
        """The theme a click switches to; an unknown theme stays unknown."""
        if self is Theme.DARK:
            return Theme.LIGHT
        if self is Theme.LIGHT:
            return Theme.DARK
        return self


def _social_links() -> str:
    links = (
        (SocialIconKind.EMAIL, SITE_METADATA.mail_to),
        (SocialIconKind.GITHUB, SITE_METADATA.github_url),
        (SocialIconKind.LINKEDIN, SITE_METADATA.linkedin_url),
        (SocialIconKind.TWITTER, SITE_METADATA.twitter_url),
    )
    return "".join(social_icon(href, kind, SocialIconSize.SM) for kind, href in links)


def footer(year: int | None = None) -> str:
    """Site footer with social links, author, copyright year and home link."""
    if year is None:
        year = datetime.now(timezone.utc).year
    return (
        '<footer class="flex flex-col items-center mt-16">'
        f'<div class="flex mb-3 space-x-4">{_social_links()}</div>'
        '<div class="flex mb-2 space-x-2 text-sm text-slate-500 dark:text-slate-400">'
        f"<div>{escape(SITE_METADATA.author)}</div>"
        "<div> \u2022 </div>"
        f"<div>\u00a9 {year}</div>"
        "<div> \u2022 </div>"
        f'<a href="/">{escape(SITE_METADATA.title)}</a>'
        "</div></footer>"
    )


def logo() -> str:
    return '<img alt="Logo" height="42" width="42" src="/favicons/logo.svg"/>'


def search_button() -> str:
    return (
        '<button aria-label="Search">'
        '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" '
        'stroke-width="1.5" stroke="currentColor" class="text-slate-900 size-6 '
        'dark:text-slate-100 dark:hover:text-primary-400 hover:text-primary-500">'
        '<path stroke-linecap="round" stroke-linejoin="round" '
        'd="M21 21l-5.197-5.197m0 0A7.5 7.5 0 105.196 5.196a7.5 7.5 0 0010.607 10.607z"/>'
        "</svg></button>"
    )


def mobile_nav() -> str:
    """The menu toggle shown on small screens, in its closed state."""
    return (
        '<button aria-label="Toggle Menu" class="sm:hidden">'
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" fill="currentColor" '
        f'class="{_TOGGLE_CLASS}">'
        '<path fill-rule="evenodd" d="M3 5a1 1 0 011-1h12a1 1 0 110 2H4a1 1 0 01-1-1zM3 '
        "10a1 1 0 011-1h12a1 1 0 110 2H4a1 1 0 01-1-1zM3 15a1 1 0 011-1h12a1 1 0 110 2H4a1 "
        '1 0 01-1-1z" clip-rule="evenodd"/>'
        "</svg></button>"
    )


def theme_switcher(theme: Theme = Theme.UNKNOWN) -> str:
    """Theme toggle button; disabled with a placeholder while the theme is unknown."""
    if theme is Theme.UNKNOWN:
        button = (
            '<button aria-label="Theme switcher" disabled>'
            '<span class="block invisible text-0 size-6">Theme Unknown</span></button>'
        )
    else:
        icon = sun_icon() if theme is Theme.LIGHT else moon_icon()
        button = f'<button aria-label="Theme switcher">{icon}</button>'
    return (
        '<div class="flex items-center mr-5">'
        '<div class="inline-block relative text-left">'
        '<div class="flex justify-center items-center '
        'dark:hover:text-primary-400 hover:text-primary-500">'
        f"{button}</div></div></div>"
    )


def header() -> str:
    """Sticky site header with logo, navigation, theme switcher and mobile menu."""
    nav_links = "".join(
        f'<a class="{_NAV_LINK_CLASS}" href="{escape(link.href)}">{escape(link.label)}</a>'
        for link in HEADER_NAV_LINKS
    )
    title = escape(SITE_METADATA.header_title)
    return (
        '<header class="flex sticky top-0 z-50 justify-between items-center py-10 '
        'w-full bg-white dark:bg-slate-950">'
        f'<a aria-label="{title}" class="break-words" href="/">'
        '<div class="flex justify-between items-center">'
        f'<div class="mr-3">{logo()}</div>'
        f'<div class="hidden h-6 text-2xl font-semibold sm:block">{title}</div>'
        "</div></a>"
        '<div class="flex items-center space-x-4 leading-5 sm:space-x-6">'
        '<nav class="hidden items-center space-x-4 sm:flex sm:space-x-6 max-w-72 lg:max-w-96">'
        f"{nav_links}</nav>"
        f"{theme_switcher()}{mobile_nav()}"
        "</div></header>"
    )


def tag(text: str) -> str:
    """A post tag label; spaces become hyphens."""
    return (
        '<div class="mr-3 text-sm font-medium uppercase text-primary-500 '
        'dark:hover:text-primary-400 hover:text-primary-600">'
        f"{escape(text.replace(' ', '-'))}</div>"
    )