from datetime import datetime
from typing import Optional

from pydantic import Field

from nexus_cms.schemas.common import CamelModel, null_means_default


class StatusUpdate(CamelModel):
    """Inbound submissions are only ever re-labelled, never edited."""
    status: str = Field(None, min_length=1)


# Demo request
class DemoRequestCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    company: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    status: str = Field("pending", min_length=1)

    defaults_on_null = null_means_default("status")

class DemoRequestResponse(CamelModel):
    id: str
    name: str
    email: str
    company: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


# Contact
class ContactCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    subject: Optional[str] = None
    message: str = Field(..., min_length=1)
    status: str = Field("pending", min_length=1)

    defaults_on_null = null_means_default("status")

class ContactResponse(CamelModel):
    id: str
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    status: str
    created_at: datetime
    updated_at: datetime


# Job application
class JobApplicationCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    address: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    phone: Optional[str] = None
    status: str = Field("pending", min_length=1)

    defaults_on_null = null_means_default("status")

class JobApplicationResponse(CamelModel):
    id: str
    name: str
    email: str
    position: str
    address: Optional[str] = None
    resume_url: Optional[str] = None
    cover_letter: Optional[str] = None
    phone: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime
