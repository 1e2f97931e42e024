from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator

from nexus_cms.models.product import PRODUCT_STATUSES
from nexus_cms.schemas.common import CamelModel, null_means_default

STATUS_PATTERN = f"^({'|'.join(PRODUCT_STATUSES)})$"

LIST_FIELDS = (
    "features", "benefits", "images", "tags", "target_audience", "industries",
    "use_cases", "compatibility", "integrations", "keywords",
)
MAP_FIELDS = ("specifications", "system_requirements")


class ProductBase(CamelModel):
    slug: Optional[str] = None
    short_description: Optional[str] = None
    description: Optional[str] = None

    price: Optional[float] = None
    original_price: Optional[float] = None

    image: Optional[str] = None
    video_url: Optional[str] = None
    brochure_url: Optional[str] = None

    category: Optional[str] = None
    sub_category: Optional[str] = None

    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class ProductCreate(ProductBase):
    title: str = Field(..., min_length=1)

    features: List[str] = Field(default_factory=list)
    specifications: Dict[str, Any] = Field(default_factory=dict)
    benefits: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    target_audience: List[str] = Field(default_factory=list)
    industries: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    system_requirements: Dict[str, Any] = Field(default_factory=dict)
    compatibility: List[str] = Field(default_factory=list)
    integrations: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)

    currency: str = "USD"
    pricing_model: str = "one-time"
    status: str = Field("draft", pattern=STATUS_PATTERN)
    is_active: bool = True
    is_featured: bool = False
    order: int = 0

    @field_validator(*LIST_FIELDS, *MAP_FIELDS, "currency", "pricing_model", "status", mode="before")
    @classmethod
    def fall_back_to_default(cls, value, info):
        # null and "" behave like an omitted field
        if value is None or value == "":
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    defaults_on_null = null_means_default("is_active", "is_featured", "order")


class ProductUpdate(ProductBase):
    title: str = Field(None, min_length=1)

    features: List[str] = None
    specifications: Dict[str, Any] = None
    benefits: List[str] = None
    images: List[str] = None
    tags: List[str] = None
    target_audience: List[str] = None
    industries: List[str] = None
    use_cases: List[str] = None
    system_requirements: Dict[str, Any] = None
    compatibility: List[str] = None
    integrations: List[str] = None
    keywords: List[str] = None

    currency: str = Field(None, min_length=1)
    pricing_model: str = Field(None, min_length=1)
    status: str = Field(None, pattern=STATUS_PATTERN)
    is_active: bool = None
    is_featured: bool = None
    order: int = None

    @field_validator(*LIST_FIELDS, mode="before")
    @classmethod
    def null_list_is_empty(cls, value):
        return [] if value is None else value

    @field_validator(*MAP_FIELDS, mode="before")
    @classmethod
    def null_map_is_empty(cls, value):
        return {} if value is None else value


class ProductResponse(ProductBase):
    id: str
    title: str
    features: List[str]
    specifications: Dict[str, Any]
    benefits: List[str]
    images: List[str]
    tags: List[str]
    target_audience: List[str]
    industries: List[str]
    use_cases: List[str]
    system_requirements: Dict[str, Any]
    compatibility: List[str]
    integrations: List[str]
    keywords: List[str]
    currency: str
    pricing_model: str
    status: str
    is_active: bool
    is_featured: bool
    order: int
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime
