"""
Template rendering utilities
"""
from pathlib import Path
from typing import Any, Dict

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .config import DEFAULT_THEME, ThemeConfig
from .content import (
    CONTACT,
    CONTACT_CARDS,
    FEATURED_ARTISTS,
    FOOTER_LINKS,
    NAV_LINKS,
    SERVICES,
    TESTIMONIALS,
)
from .metadata import SITE_METADATA, PageMetadata

# Templates ship inside the package
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Literal content shared by every page
templates.env.globals.update(
    contact=CONTACT,
    contact_cards=CONTACT_CARDS,
    nav_links=NAV_LINKS,
    footer_links=FOOTER_LINKS,
    testimonials=TESTIMONIALS,
    featured_artists=FEATURED_ARTISTS,
    services=SERVICES,
)


def shell_context(auth, metadata: PageMetadata = SITE_METADATA, theme: ThemeConfig = DEFAULT_THEME,
                  year: int | None = None) -> Dict[str, Any]:
    """Context consumed by ``layout.html``; every value is passed explicitly."""
    return {
        "auth": auth,
        "metadata": metadata,
        "theme": theme,
        "year": year,
    }


def render_template(template_name: str, context: dict, request: Request):
    """Render template with context"""
    return templates.TemplateResponse(request, template_name, context)
