"""
Default data loaded into a fresh in-memory store.
"""

import re

DEFAULT_CONTENT = {
    "site.name": "TTravel Hospitality",
    "hero.title": "Explore the World with TTRAVE",
    "hero.subtitle": "Book your next adventure with us!",
    "company.name": "TTravel Hospitality",
    "contact.phone": "+91 8100331032",
    "contact.email": "ttrave.travelagency@gmail.com",
    "contact.address": (
        "B-12, Shop No. - 111/19, Saptaparni Market, Kalyani Central Park - "
        "ward no. 11, Nadia- 741235, West Bengal, India"
    ),
    "social.facebook": "#",
    "social.instagram": "#",
    "social.linkedin": "#",
    "social.twitter": "#",
}

# Indian states and union territories
DOMESTIC_DESTINATIONS = [
    "Andhra Pradesh", "Arunachal Pradesh", "Assam", "Bihar", "Chhattisgarh", "Goa",
    "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand", "Karnataka", "Kerala",
    "Madhya Pradesh", "Maharashtra", "Manipur", "Meghalaya", "Mizoram", "Nagaland",
    "Odisha", "Punjab", "Rajasthan", "Sikkim", "Tamil Nadu", "Telangana",
    "Tripura", "Uttar Pradesh", "Uttarakhand", "West Bengal",
    "Andaman and Nicobar Islands", "Chandigarh",
    "Dadra and Nagar Haveli and Daman and Diu", "Delhi",
    "Jammu and Kashmir", "Ladakh", "Lakshadweep", "Puducherry",
]

INTERNATIONAL_DESTINATIONS = [
    "France", "United Kingdom", "Italy", "Switzerland", "Japan", "Thailand",
    "Australia", "New Zealand", "Singapore", "Malaysia", "Dubai", "Turkey",
]

DOMESTIC_IMAGE_URL = (
    "https://images.unsplash.com/photo-1524492412937-b28074a5d7da?w=400&h=200&fit=crop"
)
INTERNATIONAL_IMAGE_URL = (
    "https://images.unsplash.com/photo-1436491865332-7a61a109cc05?w=400&h=200&fit=crop"
)


def placeholder_form_url(name: str) -> str:
    """Booking form placeholder, e.g. ``West Bengal`` -> ``.../placeholder-west-bengal``."""
    slug = re.sub(r"\s+", "-", name.lower())
    return f"https://forms.gle/placeholder-{slug}"
