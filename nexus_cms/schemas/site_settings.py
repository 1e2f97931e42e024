from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus_cms.schemas.common import CamelModel


class SettingUpsert(CamelModel):
    key: str = Field(..., min_length=1)
    value: str = Field(..., min_length=1)
    description: Optional[str] = None

class SettingUpdate(CamelModel):
    value: str = Field(None, min_length=1)
    description: Optional[str] = None

class SettingResponse(CamelModel):
    id: str
    key: str
    value: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
