import os
from dataclasses import dataclass, field
from typing import List, Tuple
from urllib.parse import urlparse

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Provides validated access to third-party configuration like Supabase.
    """

    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_ANON_KEY: str = os.getenv("SUPABASE_ANON_KEY", "")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    SITE_URL: str = os.getenv("SITE_URL", "https://beyondbeautynetwork.in")
    AUTH_COOKIE_NAME: str = os.getenv("AUTH_COOKIE_NAME", "sb-access-token")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @classmethod
    def site_origins(cls) -> List[str]:
        """Apex and ``www`` origins of the public site."""
        parsed = urlparse(cls.SITE_URL)
        host = parsed.hostname or ""
        apex = host[4:] if host.startswith("www.") else host
        if not apex:
            return []
        return [f"{parsed.scheme}://{apex}", f"{parsed.scheme}://www.{apex}"]

    @classmethod
    def allowed_origins(cls, extra_origins: List[str] | None = None) -> List[str]:
        """Origins from ``CORS_ALLOWED_ORIGINS``, then the site's own, then ``extra_origins``."""
        configured = os.getenv("CORS_ALLOWED_ORIGINS", cls.CORS_ALLOWED_ORIGINS_ENV).split(",")
        candidates = [o.strip().rstrip("/") for o in configured]
        candidates += cls.site_origins()
        candidates += list(extra_origins or [])
        # dict keeps first-seen order
        return [origin for origin in dict.fromkeys(candidates) if origin]

    @classmethod
    def validate(cls) -> None:
        if not cls.SUPABASE_URL:
            raise ValueError("SUPABASE_URL environment variable is required")
        if not cls.SUPABASE_ANON_KEY:
            raise ValueError("SUPABASE_ANON_KEY environment variable is required")


@dataclass(frozen=True)
class FontResource:
    """A web font loaded once in the document head and exposed as a CSS variable."""

    family: str
    variable: str
    stylesheet_url: str

    @property
    def css_class(self) -> str:
        return self.variable.lstrip("-")


def _google_font(family: str, variable: str, weights: str) -> FontResource:
    query = family.replace(" ", "+")
    return FontResource(
        family=family,
        variable=variable,
        stylesheet_url=f"https://fonts.googleapis.com/css2?family={query}:wght@{weights}&display=swap",
    )


@dataclass(frozen=True)
class ThemeConfig:
    """Presentation settings handed to the document shell at composition time.

    ``html_fonts`` put their CSS variables on ``<html>``, ``fonts`` on ``<body>``.
    """

    html_fonts: Tuple[FontResource, ...] = field(default_factory=lambda: (
        _google_font("Poppins", "--font-poppins", "300;400;500;600;700"),
        _google_font("Playfair Display", "--font-playfair", "400;500;600;700"),
    ))
    fonts: Tuple[FontResource, ...] = field(default_factory=lambda: (
        _google_font("Geist", "--font-geist-sans", "100..900"),
        _google_font("Geist Mono", "--font-geist-mono", "100..900"),
    ))
    nav_height: str = "4rem"
    background_classes: str = "bg-gradient-to-br from-pink-200/40 via-purple-200/30 to-blue-200/30"
    theme_color: str = "#ec4899"
    lang: str = "en"

    @property
    def html_font_classes(self) -> str:
        return " ".join(font.css_class for font in self.html_fonts)

    @property
    def font_classes(self) -> str:
        return " ".join(font.css_class for font in self.fonts)

    @property
    def all_fonts(self) -> Tuple[FontResource, ...]:
        return self.html_fonts + self.fonts


DEFAULT_THEME = ThemeConfig()
