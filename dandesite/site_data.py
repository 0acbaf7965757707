"""Static site data: metadata, navigation links and homepage text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SiteMetadata:
    """Site-wide identity and links."""

    author: str
    avatar_image: str
    description: str
    email: str
    github_url: str
    header_title: str
    language: str
    locale: str
    linkedin_url: str
    mail_to: str
    opengraph_image: str
    repository_url: str
    site_url: str
    title: str
    twitter_url: str


@dataclass(frozen=True)
class HeaderNavLink:
    """A link shown in the site header."""

    href: str
    label: str


HEADER_NAV_LINKS: tuple[HeaderNavLink, ...] = (
    HeaderNavLink(href="/blog", label="Blog"),
    HeaderNavLink(href="/about", label="About"),
)

HOMEPAGE_INTRO = (
    "<p>Front-end engineer who likes to explore new technologies and create cool "
    "things, with a focus on using React, Rust, TypeScript, and Design Patterns to "
    "build scalable and maintainable applications.</p><p>Beyond web development, I "
    "take great pleasure in tea, coffee, and desserts. I love sharing these sensory "
    "experiences with those around me.</p>"
)

SITE_METADATA = SiteMetadata(
    author="Site Author",
    avatar_image="/images/avatar.png",
    description="Ame ni mo makezu | Miyazawa Kenji",
    email="author@example.com",
    github_url="https://example.com/github",
    header_title="Dande.dev",
    # Keep language tags as short as possible.
    language="en",
    locale="en-US",
    linkedin_url="https://example.com/linkedin",
    mail_to="mailto:author@example.com",
    opengraph_image="/images/opengraph.png",
    repository_url="https://example.com/repository",
    site_url="https://example.com",
    title="Dande.dev",
    twitter_url="https://example.com/twitter",
)