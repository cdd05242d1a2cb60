"""Document shell tests — region order, spacer height and head metadata."""

import re

import pytest

from bbnweb.core.config import FontResource, ThemeConfig
from bbnweb.core.metadata import SITE_METADATA
from bbnweb.core.templates import shell_context, templates
from bbnweb.services.auth_service import ANONYMOUS, AuthState


def _render_shell(auth=ANONYMOUS, metadata=SITE_METADATA, theme=ThemeConfig(), year=2025):
    return templates.get_template("layout.html").render(**shell_context(auth, metadata, theme, year=year))


def _region_positions(html):
    return (
        html.index('data-region="navigation"'),
        html.index('data-region="nav-spacer"'),
        html.index("data-auth-boundary"),
        html.index('data-region="footer"'),
    )


def test_empty_children_render_all_regions_in_order():
    html = _render_shell()
    nav, spacer, boundary, footer = _region_positions(html)
    assert nav < spacer < boundary < footer


def test_auth_boundary_is_empty_without_children():
    html = _render_shell()
    match = re.search(r"<div data-auth-boundary[^>]*>(.*?)</div>\s*<footer", html, re.S)
    assert match is not None
    assert match.group(1).strip() == ""


@pytest.mark.parametrize("nav_height", ["4rem", "64px", "5.5rem"])
def test_spacer_height_matches_navigation(nav_height):
    html = _render_shell(theme=ThemeConfig(nav_height=nav_height))
    nav_style = re.search(r'data-region="navigation"[^>]*style="height: ([^"]+)"', html).group(1)
    spacer_style = re.search(r'data-region="nav-spacer" style="height: ([^"]+)"', html).group(1)
    assert nav_style == spacer_style == nav_height
def test_document_language_and_font_classes():
    html = _render_shell()
    assert '<html lang="en" class="font-poppins font-playfair">' in html
    assert '<body class="font-geist-sans font-geist-mono antialiased">' in html
    for variable in ("--font-poppins", "--font-playfair", "--font-geist-sans", "--font-geist-mono"):
        assert variable in html


def test_background_gradient():
    html = _render_shell()
    assert 'class="bg-gradient-to-br from-pink-200/40 via-purple-200/30 to-blue-200/30" data-region="background"' in html


def test_custom_font_configuration():
    theme = ThemeConfig(fonts=(FontResource("Inter", "--font-inter", "https://example.test/inter.css"),))
    html = _render_shell(theme=theme)
    assert '<body class="font-inter antialiased">' in html
    assert 'href="https://example.test/inter.css"' in html


HEAD_TAGS = (
    "<title>Beyond Beauty Network</title>",
    '<meta name="description" content="Beyond Beauty Network connects you with verified makeup artists '
    'for bridal, party, editorial, and professional beauty services.">',
    '<meta name="application-name" content="Beyond Beauty Network">',
    '<meta name="keywords" content="makeup artists,bridal makeup,party makeup,beauty services,'
    'freelance makeup artist,BBN,Beyond Beauty Network">',
    '<meta name="author" content="Beyond Beauty Network">',
    '<meta name="creator" content="Beyond Beauty Network">',
    '<meta name="publisher" content="Beyond Beauty Network">',
    '<meta name="robots" content="index, follow">',
    '<meta name="theme-color" content="#ec4899">',
    '<link rel="canonical" href="https://beyondbeautynetwork.in/">',
    '<meta property="og:type" content="website">',
    '<meta property="og:site_name" content="Beyond Beauty Network">',
    '<meta property="og:title" content="Beyond Beauty Network">',
    '<meta property="og:description" content="Find trusted makeup artists for weddings, events, shoots, and more.">',
    '<meta property="og:url" content="https://beyondbeautynetwork.in">',
    '<meta property="og:image" content="https://beyondbeautynetwork.in/images/logo.jpeg">',
    '<meta property="og:image:width" content="1200">',
    '<meta property="og:image:height" content="630">',
    '<meta property="og:image:alt" content="Beyond Beauty Network Logo">',
    '<meta name="twitter:card" content="summary_large_image">',
    '<meta name="twitter:title" content="Beyond Beauty Network">',
    '<meta name="twitter:description" content="Discover verified makeup artists for every occasion.">',
    '<meta name="twitter:image" content="https://beyondbeautynetwork.in/images/logo.jpeg">',
    '<link rel="icon" href="/favicon.ico">',
    '<link rel="apple-touch-icon" href="/apple-touch-icon.png">',
)


@pytest.mark.parametrize("tag", HEAD_TAGS)
def test_head_metadata(tag):
    assert tag in _render_shell()


def test_nested_page_title():
    html = _render_shell(metadata=SITE_METADATA.for_page(title="Contact Us", path="/contact"))
    assert "<title>Contact Us | Beyond Beauty Network</title>" in html
    assert '<meta property="og:title" content="Beyond Beauty Network">' in html


def test_background_container_wraps_regions():
    html = _render_shell()
    assert html.index('data-region="background"') < html.index('data-region="navigation"')


def test_footer_year_is_injected():
    assert "&copy; 2031 Beyond Beauty Network" in _render_shell(year=2031)


def test_anonymous_navigation():
    html = _render_shell()
    assert 'data-authenticated="false"' in html
    assert "Sign out" not in html


def test_authenticated_navigation_reads_injected_state():
    auth = AuthState(
        user={"id": "u1", "email": "priya@example.com"},
        profile={"id": "p1", "full_name": "Priya Sharma"},
        makeup_artist={"id": "a1", "username": "priya"},
    )
    html = _render_shell(auth=auth)
    assert 'data-authenticated="true"' in html
    assert "Priya Sharma" in html
    assert ">Artist</span>" in html
    assert 'href="/auth/logout"' in html


def test_footer_ends_with_map_frame():
    html = _render_shell()
    footer = html[html.index('data-region="footer"'):]
    assert 'data-region="footer-map"' in footer
    assert footer.count("<iframe") == 1
    assert "allowfullscreen" in footer
