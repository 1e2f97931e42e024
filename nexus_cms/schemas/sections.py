from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from nexus_cms.schemas.common import CamelModel, null_means_default


# Hero section
class HeroSectionBase(CamelModel):
    subtitle: Optional[str] = None
    description: Optional[str] = None
    button_text: Optional[str] = None
    button_link: Optional[str] = None
    background_image: Optional[str] = None

class HeroSectionCreate(HeroSectionBase):
    title: str = Field(..., min_length=1)
    is_active: bool = True

    defaults_on_null = null_means_default("is_active")

class HeroSectionUpdate(HeroSectionBase):
    title: str = Field(None, min_length=1)
    is_active: bool = None

class HeroSectionResponse(HeroSectionBase):
    id: str
    title: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


# Testimonial
class TestimonialBase(CamelModel):
    role: Optional[str] = None
    company: Optional[str] = None
    avatar: Optional[str] = None

class TestimonialCreate(TestimonialBase):
    name: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    rating: int = Field(5, ge=1, le=5)
    is_active: bool = True
    order: int = 0

    defaults_on_null = null_means_default("rating", "is_active", "order")

class TestimonialUpdate(TestimonialBase):
    name: str = Field(None, min_length=1)
    content: str = Field(None, min_length=1)
    rating: int = Field(None, ge=1, le=5)
    is_active: bool = None
    order: int = None

class TestimonialResponse(TestimonialBase):
    id: str
    name: str
    content: str
    rating: int
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime


# Why choose us
class WhyChooseUsCreate(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    icon: Optional[str] = None
    is_active: bool = True
    order: int = 0

    defaults_on_null = null_means_default("is_active", "order")

class WhyChooseUsUpdate(CamelModel):
    title: str = Field(None, min_length=1)
    description: str = Field(None, min_length=1)
    icon: Optional[str] = None
    is_active: bool = None
    order: int = None

class WhyChooseUsResponse(CamelModel):
    id: str
    title: str
    description: str
    icon: Optional[str] = None
    is_active: bool
    order: int
    created_at: datetime
    updated_at: datetime


# Book demo section
class BookDemoSectionBase(CamelModel):
    description: Optional[str] = None
    button_text: Optional[str] = None

    @field_validator("form_fields", mode="before", check_fields=False)
    @classmethod
    def null_form_fields(cls, value):
        return {} if value is None else value

class BookDemoSectionCreate(BookDemoSectionBase):
    title: str = Field(..., min_length=1)
    form_fields: Dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True

    defaults_on_null = null_means_default("is_active")

class BookDemoSectionUpdate(BookDemoSectionBase):
    title: str = Field(None, min_length=1)
    form_fields: Dict[str, Any] = None
    is_active: bool = None

class BookDemoSectionResponse(BookDemoSectionBase):
    id: str
    title: str
    form_fields: Dict[str, Any]
    is_active: bool
    created_at: datetime
    updated_at: datetime
