from sqlalchemy import Column, String, Text
from nexus_cms.models.base import BaseModel

class DemoRequest(BaseModel):
    __tablename__ = "demo_request"

    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    company = Column(String(150))
    phone = Column(String(50))
    message = Column(Text)
    status = Column(String(20), default="pending", nullable=False, index=True)
