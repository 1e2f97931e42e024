from sqlalchemy import Column, String, Text, Boolean, Integer
from nexus_cms.models.base import BaseModel

class WhyChooseUsItem(BaseModel):
    __tablename__ = "why_choose_us_item"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String(255))
    is_active = Column(Boolean, default=True, nullable=False)
    order = Column(Integer, default=0, nullable=False)
