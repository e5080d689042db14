"""
Entity models using Pydantic.
Attributes are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_DESTINATION_ICON = "bi-geo-alt-fill"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DestinationType(str, Enum):
    """Destination type enumeration."""

    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class ContactStatus(str, Enum):
    """Contact submission status enumeration."""

    PENDING = "pending"
    RESPONDED = "responded"


# Users


class User(CamelModel):
    """Back-office user. Password is held only as a bcrypt hash."""

    id: str
    username: str
    password_hash: str = Field(..., exclude=True)


class UserCreate(CamelModel):
    username: str
    password_hash: str


# Destinations


class Destination(CamelModel):
    """Travel destination shown on the public site."""

    id: str
    name: str
    type: DestinationType
    image_url: str
    form_url: str
    icon: str = DEFAULT_DESTINATION_ICON
    is_active: bool = True
    created_at: Optional[datetime] = None


class DestinationCreate(CamelModel):
    name: str = Field(..., min_length=1, description="Destination name")
    type: DestinationType = Field(..., description="domestic or international")
    image_url: str = Field(..., description="Card image URL")
    form_url: str = Field(..., description="Booking form URL")
    icon: Optional[str] = Field(None, description="Bootstrap icon class")
    is_active: Optional[bool] = None


class DestinationUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[DestinationType] = None
    image_url: Optional[str] = None
    form_url: Optional[str] = None
    icon: Optional[str] = None
    is_active: Optional[bool] = None


# Content


class Content(CamelModel):
    """Editable site copy, addressed by a dotted key such as ``hero.title``."""

    id: str
    key: str
    value: str
    updated_at: Optional[datetime] = None


class ContentCreate(CamelModel):
    key: str = Field(..., min_length=1, description="Dotted content key")
    value: str = Field(..., description="Content value")


# Contact submissions


class ContactSubmission(CamelModel):
    """Message sent through the public contact form."""

    id: str
    first_name: str
    last_name: str
    email: str
    subject: str
    message: str
    status: str = ContactStatus.PENDING.value
    created_at: Optional[datetime] = None


class ContactSubmissionCreate(CamelModel):
    first_name: str = Field(..., min_length=1)
    last_name: str = ""
    email: str = Field(..., min_length=3)
    subject: str = ""
    message: str = Field(..., min_length=1)


# Newsletter


class NewsletterSubscription(CamelModel):
    id: str
    email: str
    is_active: bool = True
    created_at: Optional[datetime] = None


class NewsletterSubscriptionCreate(CamelModel):
    email: str = Field(..., min_length=3)


# Packages


class Package(CamelModel):
    """Travel package offered for a destination."""

    id: str
    destination_id: str
    name: str
    description: str
    image_url: str
    price_per_person: str
    duration: str
    highlights: List[str] = Field(default_factory=list)
    location: str
    is_featured: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None


class PackageCreate(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    destination_id: str = Field(..., description="Referenced destination id")
    name: str = Field(..., min_length=1)
    description: str = ""
    image_url: str = ""
    price_per_person: str = ""
    duration: str = ""
    highlights: List[str] = Field(default_factory=list)
    location: str = ""
    is_featured: bool = False
    is_active: Optional[bool] = None


class PackageUpdate(CamelModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    destination_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price_per_person: Optional[str] = None
    duration: Optional[str] = None
    highlights: Optional[List[str]] = None
    location: Optional[str] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None


# Gallery


class GalleryImage(CamelModel):
    id: str
    image_url: str
    caption: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


class GalleryImageCreate(CamelModel):
    image_url: str = Field(..., min_length=1)
    caption: Optional[str] = None
