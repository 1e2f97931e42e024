from sqlalchemy import Column, String, Text
from nexus_cms.models.base import BaseModel

class Contact(BaseModel):
    __tablename__ = "contact"

    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255))
    message = Column(Text, nullable=False)
    status = Column(String(20), default="pending", nullable=False)
