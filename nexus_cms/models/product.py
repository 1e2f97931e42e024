from sqlalchemy import Column, String, Text, Boolean, Integer, Float, JSON
from nexus_cms.models.base import BaseModel, UTCDateTime

PRODUCT_STATUSES = ("draft", "published", "archived")

class Product(BaseModel):
    __tablename__ = "product"

    title = Column(String(255), nullable=False)
    # Derived from the title when absent; not unique
    slug = Column(String(255), index=True)
    short_description = Column(Text)
    description = Column(Text)
    features = Column(JSON, default=list, nullable=False)
    specifications = Column(JSON, default=dict, nullable=False)
    benefits = Column(JSON, default=list, nullable=False)

    # Pricing
    price = Column(Float)
    original_price = Column(Float)
    currency = Column(String(10), default="USD", nullable=False)
    pricing_model = Column(String(50), default="one-time", nullable=False)

    # Media
    image = Column(String(500))
    images = Column(JSON, default=list, nullable=False)
    video_url = Column(String(500))
    brochure_url = Column(String(500))

    # Categorization
    category = Column(String(100), index=True)
    sub_category = Column(String(100))
    tags = Column(JSON, default=list, nullable=False)

    # Business info
    target_audience = Column(JSON, default=list, nullable=False)
    industries = Column(JSON, default=list, nullable=False)
    use_cases = Column(JSON, default=list, nullable=False)

    # Technical
    system_requirements = Column(JSON, default=dict, nullable=False)
    compatibility = Column(JSON, default=list, nullable=False)
    integrations = Column(JSON, default=list, nullable=False)

    # Marketing
    meta_title = Column(String(255))
    meta_description = Column(Text)
    keywords = Column(JSON, default=list, nullable=False)

    # Status & organization
    status = Column(String(20), default="draft", nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)
    order = Column(Integer, default=0, nullable=False)
    published_at = Column(UTCDateTime)
