from sqlalchemy import Column, String, Text, Boolean, Integer
from nexus_cms.models.base import BaseModel

class Testimonial(BaseModel):
    __tablename__ = "testimonial"

    name = Column(String(150), nullable=False)
    role = Column(String(150))
    company = Column(String(150))
    content = Column(Text, nullable=False)
    rating = Column(Integer, default=5, nullable=False)  # 1-5
    avatar = Column(String(500))
    is_active = Column(Boolean, default=True, nullable=False)
    order = Column(Integer, default=0, nullable=False)
