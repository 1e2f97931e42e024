from sqlalchemy import Column, String
from nexus_cms.models.base import BaseModel

class Admin(BaseModel):
    __tablename__ = "admin"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(150), nullable=False)
    # bcrypt digest, never serialized
    password = Column(String(255), nullable=False)
