import pytest

from dandesite.components import (
    Theme,
    footer,
    header,
    logo,
    mobile_nav,
    search_button,
    tag,
    theme_switcher,
)
from dandesite.icons import moon_icon, sun_icon
from dandesite.site_data import HEADER_NAV_LINKS, SITE_METADATA


def test_theme_toggles_between_dark_and_light():
    assert Theme.DARK.toggled() is Theme.LIGHT
    assert Theme.LIGHT.toggled() is Theme.DARK


def test_unknown_theme_does_not_toggle():
    assert Theme.UNKNOWN.toggled() is Theme.UNKNOWN


@pytest.mark.parametrize("name", ["DARK", "LIGHT", "UNKNOWN"])
def test_theme_double_toggle_is_identity(name):
    member = Theme[name]
    assert Theme.toggled(Theme.toggled(member)) is member


def test_theme_string_is_lowercase_value():
    assert str(Theme.DARK.toggled()) == "light"
    assert str(Theme.LIGHT.toggled()) == "dark"


def test_footer_contains_year_author_and_links():
    result = footer(2031)
    assert "\u00a9 2031" in result
    assert SITE_METADATA.author in result
    assert f'href="{SITE_METADATA.github_url}"' in result
    assert f'href="{SITE_METADATA.mail_to}"' in result
    assert result.startswith("<footer") and result.endswith("</footer>")


def test_footer_defaults_to_current_year():
    from datetime import datetime, timezone

    assert f"\u00a9 {datetime.now(timezone.utc).year}" in footer()


def test_logo_points_to_svg():
    assert 'src="/favicons/logo.svg"' in logo()


def test_header_lists_every_nav_link():
    result = header()
    for link in HEADER_NAV_LINKS:
        assert f'href="{link.href}">{link.label}</a>' in result
    assert logo() in result
    assert mobile_nav() in result
    assert theme_switcher(Theme.UNKNOWN) in result


def test_search_button_is_labelled():
    result = search_button()
    assert result.startswith('<button aria-label="Search">')
    assert result.endswith("</button>")


def test_mobile_nav_is_toggle_button():
    result = mobile_nav()
    assert 'aria-label="Toggle Menu"' in result
    assert result.endswith("</button>")


def test_theme_switcher_unknown_is_disabled_placeholder():
    result = theme_switcher(Theme.UNKNOWN)
    assert "disabled" in result
    assert "Theme Unknown" in result
    assert theme_switcher() == result


def test_theme_switcher_light_shows_sun():
    result = theme_switcher(Theme.LIGHT)
    assert sun_icon() in result
    assert moon_icon() not in result
    assert "disabled" not in result


def test_theme_switcher_dark_shows_moon():
    result = theme_switcher(Theme.DARK)
    assert moon_icon() in result
    assert sun_icon() not in result


def test_tag_replaces_spaces_with_hyphens():
    result = tag("web dev tips")
    assert ">web-dev-tips</div>" in result


def test_tag_escapes_markup():
    result = tag("<b>")
    assert "<b>" not in result
    assert "&lt;b&gt;" in result