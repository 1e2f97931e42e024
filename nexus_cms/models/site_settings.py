from sqlalchemy import Column, String, Text
from nexus_cms.models.base import BaseModel

class SiteSettings(BaseModel):
    __tablename__ = "site_settings"

    # 'key' is the setting name (e.g. 'contact_email')
    key = Column(String(100), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)
    description = Column(String(500))
