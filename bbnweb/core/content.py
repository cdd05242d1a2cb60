"""Literal content rendered by the site's sections.

Nothing here is computed at runtime; templates only read these records.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StaticContactRecord:
    phone: str = "+917995514547"
    phone_display: str = "+91 79955 14547"
    whatsapp_number: str = "917995514547"
    email: str = "infomultaigroup@gmail.com"
    business_hours: str = "Mon – Sat: 11:00 AM – 7:00 PM"
    map_embed_url: str = (
        "https://www.google.com/maps/embed?pb=!1m18!1m12!1m3!1d3806.921083441193"
        "!2d78.54100287516552!3d17.415574483476405!2m3!1f0!2f0!3f0!3m2!1i1024"
        "!2i768!4f13.1!3m3!1m2!1s0x3bcb998e2623063f%3A0xe3f1464785e4ea45!2sSBMS"
        "!5e0!3m2!1sen!2sin!4v1756804469286!5m2!1sen!2sin"
    )
    map_height: int = 350
    instagram_url: str = "https://instagram.com/beyond_beauty_network"
    footer_whatsapp_number: str = "918897955253"

    @property
    def tel_href(self) -> str:
        return f"tel:{self.phone}"

    @property
    def whatsapp_href(self) -> str:
        return f"https://wa.me/{self.whatsapp_number}"

    @property
    def mailto_href(self) -> str:
        return f"mailto:{self.email}"

    @property
    def footer_whatsapp_href(self) -> str:
        return f"https://wa.me/{self.footer_whatsapp_number}"


@dataclass(frozen=True)
class ContactCard:
    """One card of the contact panel.

    ``style`` is ``"text"`` for inline links, ``"button"`` for the
    messaging card whose value is itself the call to action, and
    ``"plain"`` for informational text with no link.
    """

    key: str
    icon: str
    label: str
    value: str
    href: Optional[str] = None
    style: str = "text"
    new_tab: bool = False


def contact_cards(record: StaticContactRecord) -> Tuple[ContactCard, ...]:
    return (
        ContactCard(key="phone", icon="phone", label="Call Us",
                    value=record.phone_display, href=record.tel_href),
        ContactCard(key="whatsapp", icon="whatsapp", label="WhatsApp",
                    value="Chat on WhatsApp", href=record.whatsapp_href,
                    style="button", new_tab=True),
        ContactCard(key="email", icon="mail", label="Email",
                    value=record.email, href=record.mailto_href),
        ContactCard(key="hours", icon="clock", label="Working Hours",
                    value=record.business_hours, style="plain"),
    )


@dataclass(frozen=True)
class Testimonial:
    text: str
    name: str
    initial: str


CONTACT = StaticContactRecord()
CONTACT_CARDS = contact_cards(CONTACT)

TESTIMONIALS: Tuple[Testimonial, ...] = (
    Testimonial(text="BBN transformed my wedding day experience...", name="Ananya Reddy", initial="A"),
    Testimonial(text="Professional, reliable, and extraordinarily talented...", name="Meera Singh", initial="M"),
    Testimonial(text="The caliber of artists on this platform is unparalleled...", name="Rhea Kapoor", initial="R"),
)

NAV_LINKS: Tuple[Tuple[str, str], ...] = (
    ("#home", "Home"),
    ("#services", "Services"),
    ("#artists", "Artists"),
    ("#about", "About"),
    ("#contact", "Contact"),
    ("#join", "Join as an Artist"),
)

FOOTER_LINKS: Tuple[Tuple[str, str], ...] = (
    ("/", "Home"),
    ("/artists", "Artists"),
    ("/services", "Services"),
    ("/contact", "Contact"),
)


@dataclass(frozen=True)
class FeaturedArtist:
    name: str
    specialty: str
    location: str
    emoji: str


FEATURED_ARTISTS: Tuple[FeaturedArtist, ...] = (
    FeaturedArtist(name="Priya Sharma", specialty="Bridal Specialist", location="Mumbai, Maharashtra", emoji="💄"),
    FeaturedArtist(name="Aisha Khan", specialty="Editorial & Fashion", location="New Delhi", emoji="✨"),
    FeaturedArtist(name="Neha Patel", specialty="Natural Glam Expert", location="Bangalore, Karnataka", emoji="🌸"),
    FeaturedArtist(name="Simran Kaur", specialty="Party & Events", location="Pune, Maharashtra", emoji="🎨"),
)


@dataclass(frozen=True)
class Service:
    emoji: str
    title: str
    description: str


SERVICES: Tuple[Service, ...] = (
    Service(emoji="👰", title="Bridal Makeup", description="Timeless elegance for your special day..."),
    Service(emoji="🎉", title="Party Glam", description="Make a lasting impression at any celebration..."),
    Service(emoji="📸", title="Editorial Look", description="High-fashion artistry for photoshoots..."),
    Service(emoji="🎬", title="Photoshoot", description="Camera-ready perfection tailored to your vision..."),
    Service(emoji="🌿", title="Natural Glow", description="Enhance your inherent beauty with soft makeup..."),
    Service(emoji="🌟", title="Special Occasion", description="Celebrate life’s milestones with flawless makeup..."),
)
