import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from nexus_cms.core.dispatch import resolve_action, run_action
from nexus_cms.core.exceptions import AuthException, BadRequestException, ConflictException
from nexus_cms.core.security import (
    authenticate_token, create_admin_token, get_password_hash, oauth2_scheme, verify_password,
)
from nexus_cms.database import get_db
from nexus_cms.models.admin import Admin
from nexus_cms.schemas import (
    AdminCreate, AdminCreatedResponse, AdminProfile, AdminSummary, Login, LoginResponse, validate_payload,
)
from nexus_cms.services import crud

logger = logging.getLogger(__name__)

router = APIRouter()


class AuthAction(str, Enum):
    LOGIN = "login"
    ADD_ADMIN = "add-admin"
    GET_ADMINS = "get-admins"
    ME = "me"


def _has_fields(body: Any, *fields: str) -> bool:
    return isinstance(body, dict) and all(body.get(field) for field in fields)


def login(db: Session, body: Any):
    if not _has_fields(body, "email", "password"):
        raise BadRequestException("Email and password are required")
    credentials = validate_payload(Login, body)

    # Same message for unknown email and wrong password
    admin = db.query(Admin).filter(Admin.email == credentials.email).first()
    if not admin or not verify_password(credentials.password, admin.password):
        logger.info("Failed login for %s", credentials.email)
        raise AuthException("Invalid credentials")

    return LoginResponse(
        message="Login successful",
        token=create_admin_token(admin),
        admin=AdminSummary.model_validate(admin),
    )


def add_admin(db: Session, body: Any):
    if not _has_fields(body, "name", "email", "password"):
        raise BadRequestException("Name, email, and password are required")
    admin_data = validate_payload(AdminCreate, body)

    existing_admin = db.query(Admin).filter(Admin.email == admin_data.email).first()
    if existing_admin:
        raise ConflictException("Admin with this email already exists")

    admin = crud.create(db, Admin, {
        "name": admin_data.name,
        "email": admin_data.email,
        "password": get_password_hash(admin_data.password),
    })
    logger.info("Admin %s created", admin.email)
    return AdminCreatedResponse(message="Admin created successfully", admin=AdminProfile.model_validate(admin))


def get_admins(db: Session, admin_id: Optional[str], token: Optional[str]):
    if admin_id:
        admin = crud.fetch(db, Admin, admin_id)
        return AdminProfile.model_validate(admin) if admin else None
    admins = crud.list_records(db, Admin, (Admin.created_at.desc(),))
    return [AdminProfile.model_validate(a) for a in admins]


def me(db: Session, admin_id: Optional[str], token: Optional[str]):
    return AdminProfile.model_validate(authenticate_token(db, token))


GET_HANDLERS: Dict[AuthAction, Callable] = {
    AuthAction.GET_ADMINS: get_admins,
    AuthAction.ME: me,
}

POST_HANDLERS: Dict[AuthAction, Callable] = {
    AuthAction.LOGIN: login,
    AuthAction.ADD_ADMIN: add_admin,
}


@router.get("")
async def handle_get(
    action: Optional[str] = None,
    id: Optional[str] = None,
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
):
    handler = resolve_action(action, AuthAction, GET_HANDLERS)
    return await run_action("GET", action, handler, db, id, token)


@router.post("")
async def handle_post(
    action: Optional[str] = None,
    body: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    handler = resolve_action(action, AuthAction, POST_HANDLERS)
    return await run_action("POST", action, handler, db, body)
