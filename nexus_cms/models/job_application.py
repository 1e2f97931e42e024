from sqlalchemy import Column, String, Text
from nexus_cms.models.base import BaseModel

class JobApplication(BaseModel):
    __tablename__ = "job_application"

    name = Column(String(150), nullable=False)
    email = Column(String(255), nullable=False)
    address = Column(String(500))
    position = Column(String(150), nullable=False, index=True)
    resume_url = Column(String(500))
    cover_letter = Column(Text)
    phone = Column(String(50))
    status = Column(String(20), default="pending", nullable=False, index=True)
