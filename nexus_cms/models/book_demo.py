from sqlalchemy import Column, String, Text, Boolean, JSON
from nexus_cms.models.base import BaseModel

class BookDemoSection(BaseModel):
    __tablename__ = "book_demo_section"

    title = Column(String(255), nullable=False)
    description = Column(Text)
    button_text = Column(String(100))
    form_fields = Column(JSON, default=dict, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
