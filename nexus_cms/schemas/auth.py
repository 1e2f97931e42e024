from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from nexus_cms.schemas.common import CamelModel


class Login(BaseModel):
    email: str
    password: str


class AdminCreate(BaseModel):
    name: str
    email: str = Field(..., min_length=1)
    password: str


class TokenData(BaseModel):
    admin_id: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None


class AdminSummary(CamelModel):
    id: str
    email: str
    name: str


class AdminProfile(AdminSummary):
    created_at: datetime
    updated_at: datetime


class LoginResponse(CamelModel):
    message: str
    token: str
    admin: AdminSummary


class AdminCreatedResponse(CamelModel):
    message: str
    admin: AdminProfile
