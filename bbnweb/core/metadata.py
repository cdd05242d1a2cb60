"""Document-level metadata for every page of the site.

A single ``SITE_METADATA`` record is declared here and handed to the
document shell, which renders it into ``<head>`` tags. Nested pages derive
their own record with :meth:`PageMetadata.for_page`; the title of a nested
page is substituted into ``title_template`` while the social-preview
records are inherited from the site record unchanged.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
from urllib.parse import urljoin

from .config import Config


SITE_NAME = "Beyond Beauty Network"
SITE_URL = "https://beyondbeautynetwork.in"
DEFAULT_DESCRIPTION = (
    "Beyond Beauty Network connects you with verified makeup artists for "
    "bridal, party, editorial, and professional beauty services."
)
LOGO_PATH = "/images/logo.jpeg"


@dataclass(frozen=True)
class Robots:
    index: bool = True
    follow: bool = True

    @property
    def content(self) -> str:
        return ", ".join([
            "index" if self.index else "noindex",
            "follow" if self.follow else "nofollow",
        ])


@dataclass(frozen=True)
class PreviewImage:
    url: str = LOGO_PATH
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None


@dataclass(frozen=True)
class OpenGraph:
    type: str = "website"
    site_name: str = SITE_NAME
    title: str = SITE_NAME
    description: str = "Find trusted makeup artists for weddings, events, shoots, and more."
    url: str = SITE_URL
    images: Tuple[PreviewImage, ...] = (
        PreviewImage(url=LOGO_PATH, width=1200, height=630, alt="Beyond Beauty Network Logo"),
    )


@dataclass(frozen=True)
class TwitterCard:
    card: str = "summary_large_image"
    title: str = SITE_NAME
    description: str = "Discover verified makeup artists for every occasion."
    images: Tuple[str, ...] = (LOGO_PATH,)


@dataclass(frozen=True)
class Icons:
    icon: str = "/favicon.ico"
    apple: str = "/apple-touch-icon.png"


@dataclass(frozen=True)
class PageMetadata:
    title_default: str = SITE_NAME
    title_template: str = f"%s | {SITE_NAME}"
    description: str = DEFAULT_DESCRIPTION
    application_name: str = SITE_NAME
    keywords: Tuple[str, ...] = (
        "makeup artists",
        "bridal makeup",
        "party makeup",
        "beauty services",
        "freelance makeup artist",
        "BBN",
        "Beyond Beauty Network",
    )
    authors: Tuple[str, ...] = (SITE_NAME,)
    creator: str = SITE_NAME
    publisher: str = SITE_NAME
    robots: Robots = field(default_factory=Robots)
    open_graph: OpenGraph = field(default_factory=OpenGraph)
    twitter: TwitterCard = field(default_factory=TwitterCard)
    icons: Icons = field(default_factory=Icons)
    metadata_base: str = SITE_URL
    theme_color: str = "#ec4899"
    page_title: Optional[str] = None
    canonical_path: str = "/"

    def resolve_title(self, page_title: Optional[str] = None) -> str:
        """Return the document title for ``page_title``.

        The root page (no page title) gets ``title_default``; any other page
        gets ``title_template`` with its title substituted.
        """
        if page_title is None:
            page_title = self.page_title
        if not page_title:
            return self.title_default
        return self.title_template % page_title

    @property
    def title(self) -> str:
        return self.resolve_title()

    def absolute_url(self, path: str) -> str:
        """Resolve a site-relative path against ``metadata_base``."""
        return urljoin(self.metadata_base.rstrip("/") + "/", path.lstrip("/"))

    @property
    def canonical_url(self) -> str:
        return self.absolute_url(self.canonical_path)

    def for_page(self, title: Optional[str] = None, description: Optional[str] = None,
                 path: str = "/") -> "PageMetadata":
        """Derive the metadata record of a nested page."""
        return replace(
            self,
            page_title=title,
            description=description or self.description,
            canonical_path=path,
        )


SITE_METADATA = PageMetadata(
    metadata_base=Config.SITE_URL,
    open_graph=OpenGraph(url=Config.SITE_URL),
)
