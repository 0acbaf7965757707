"""SVG icons and social links rendered as HTML fragments."""

from __future__ import annotations

from enum import Enum
from html import escape

_SOCIAL_ICON_BASE_CLASS = (
    "text-slate-700 fill-current dark:text-slate-200 size-16 "
    "dark:hover:text-primary-400 hover:text-primary-500"
)


class SocialIconKind(Enum):
    """The networks a social icon can link to."""

    EMAIL = "Email"
    GITHUB = "Github"
    LINKEDIN = "Linkedin"
    TWITTER = "Twitter"


class SocialIconSize(Enum):
    """Size variants of a social icon, as Tailwind classes."""

    DEFAULT = "size-8"
    SM = "size-6"


def _class_attr(css_class: str | None) -> str:
    return "" if css_class is None else f' class="{escape(css_class)}"'


def moon_icon() -> str:
    """Icon shown while the dark theme is active."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" '
        'fill="currentColor" class="group:hover:text-slate-100 size-6">'
        '<path d="M17.293 13.293A8 8 0 016.707 2.707a8.001 8.001 0 1010.586 10.586z"/>'
        "</svg>"
    )


def sun_icon() -> str:
    """Icon shown while the light theme is active."""
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20" '
        'fill="currentColor" class="group:hover:text-slate-100 size-6">'
        '<path fill-rule="evenodd" d="M10 2a1 1 0 011 1v1a1 1 0 11-2 0V3a1 1 0 011-1zm4 '
        "8a4 4 0 11-8 0 4 4 0 018 0zm-.464 4.95l.707.707a1 1 0 001.414-1.414l-.707-.707a1 "
        "1 0 00-1.414 1.414zm2.12-10.607a1 1 0 010 1.414l-.706.707a1 1 0 11-1.414-1.414l"
        ".707-.707a1 1 0 011.414 0zM17 11a1 1 0 100-2h-1a1 1 0 100 2h1zm-7 4a1 1 0 011 1v1a1 "
        "1 0 11-2 0v-1a1 1 0 011-1zM5.05 6.464A1 1 0 106.465 5.05l-.708-.707a1 1 0 00-1.414 "
        "1.414l.707.707zm1.414 8.486l-.707.707a1 1 0 01-1.414-1.414l.707-.707a1 1 0 011.414 "
        '1.414zM4 11a1 1 0 100-2H3a1 1 0 000 2h1z" clip-rule="evenodd"/>'
        "</svg>"
    )


def email_icon(css_class: str | None = None) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 20 20"{_class_attr(css_class)}>'
        '<path d="M2.003 5.884L10 9.882l7.997-3.998A2 2 0 0016 4H4a2 2 0 00-1.997 1.884z"/>'
        '<path d="M18 8.118l-8 4-8-4V14a2 2 0 002 2h12a2 2 0 002-2V8.118z"/>'
        "</svg>"
    )


def github_icon(css_class: str | None = None) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"{_class_attr(css_class)}>'
        '<path d="M12 .297c-6.63 0-12 5.373-12 12 0 5.303 3.438 9.8 8.205 11.385.6.113.82-.258'
        ".82-.577 0-.285-.01-1.04-.015-2.04-3.338.724-4.042-1.61-4.042-1.61C4.422 18.07 3.633 "
        "17.7 3.633 17.7c-1.087-.744.084-.729.084-.729 1.205.084 1.838 1.236 1.838 1.236 1.07 "
        "1.835 2.809 1.305 3.495.998.108-.776.417-1.305.76-1.605-2.665-.3-5.466-1.332-5.466-5.93 "
        "0-1.31.465-2.38 1.235-3.22-.135-.303-.54-1.523.105-3.176 0 0 1.005-.322 3.3 1.23.96-.267 "
        "1.98-.399 3-.405 1.02.006 2.04.138 3 .405 2.28-1.552 3.285-1.23 3.285-1.23.645 1.653.24 "
        "2.873.12 3.176.765.84 1.23 1.91 1.23 3.22 0 4.61-2.805 5.625-5.475 5.92.42.36.81 1.096"
        ".81 2.22 0 1.606-.015 2.896-.015 3.286 0 .315.21.69.825.57C20.565 22.092 24 17.592 24 "
        '12.297c0-6.627-5.373-12-12-12"/>'
        "</svg>"
    )


def linkedin_icon(css_class: str | None = None) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"{_class_attr(css_class)}>'
        '<path d="M20.447 20.452h-3.554v-5.569c0-1.328-.027-3.037-1.852-3.037-1.853 0-2.136 '
        "1.445-2.136 2.939v5.667H9.351V9h3.414v1.561h.046c.477-.9 1.637-1.85 3.37-1.85 3.601 0 "
        "4.267 2.37 4.267 5.455v6.286zM5.337 7.433a2.062 2.062 0 01-2.063-2.065 2.064 2.064 0 "
        "112.063 2.065zm1.782 13.019H3.555V9h3.564v11.452zM22.225 0H1.771C.792 0 0 .774 0 "
        "1.729v20.542C0 23.227.792 24 1.771 24h20.451C23.2 24 24 23.227 24 22.271V1.729C24 "
        '.774 23.2 0 22.222 0h.003z"/>'
        "</svg>"
    )


def twitter_icon(css_class: str | None = None) -> str:
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"{_class_attr(css_class)}>'
        '<path d="M23.953 4.57a10 10 0 01-2.825.775 4.958 4.958 0 002.163-2.723c-.951.555-2.005'
        ".959-3.127 1.184a4.92 4.92 0 00-8.384 4.482C7.69 8.095 4.067 6.13 1.64 3.162a4.822 "
        "4.822 0 00-.666 2.475c0 1.71.87 3.213 2.188 4.096a4.904 4.904 0 01-2.228-.616v.06a4.923 "
        "4.923 0 003.946 4.827 4.996 4.996 0 01-2.212.085 4.936 4.936 0 004.604 3.417 9.867 "
        "9.867 0 01-6.102 2.105c-.39 0-.779-.023-1.17-.067a13.995 13.995 0 007.557 2.209c9.053 "
        "0 13.998-7.496 13.998-13.985 0-.21 0-.42-.015-.63A9.935 9.935 0 0024 4.59z\"/>"
        "</svg>"
    )


_ICON_RENDERERS = {
    SocialIconKind.EMAIL: email_icon,
    SocialIconKind.GITHUB: github_icon,
    SocialIconKind.LINKEDIN: linkedin_icon,
    SocialIconKind.TWITTER: twitter_icon,
}


def social_icon_class(size: SocialIconSize = SocialIconSize.DEFAULT) -> str:
    """Base icon classes with the size variant taking the place of the base size."""
    base = [c for c in _SOCIAL_ICON_BASE_CLASS.split() if not c.startswith("size-")]
    return " ".join([*base, size.value])


def social_icon(
    href: str,
    kind: SocialIconKind,
    size: SocialIconSize = SocialIconSize.DEFAULT,
) -> str:
    """A link wrapping the icon of *kind*, with a screen-reader label."""
    icon = _ICON_RENDERERS[kind](social_icon_class(size))
    return (
        f'<a href="{escape(href)}">'
        f'<span class="sr-only">{escape(kind.value)}</span>{icon}</a>'
    )