from sqlalchemy import Column, String, Text, Boolean
from nexus_cms.models.base import BaseModel

class HeroSection(BaseModel):
    __tablename__ = "hero_section"

    title = Column(String(255), nullable=False)
    subtitle = Column(String(255))
    description = Column(Text)
    button_text = Column(String(100))
    button_link = Column(String(500))
    background_image = Column(String(500))
    is_active = Column(Boolean, default=True, nullable=False)
