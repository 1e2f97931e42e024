import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from nexus_cms.config import settings
from nexus_cms.core.exceptions import AuthException
from nexus_cms.models.admin import Admin
from nexus_cms.schemas.auth import TokenData

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth?action=login", auto_error=False)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def create_admin_token(admin: Admin) -> str:
    return create_access_token(
        data={"sub": admin.id, "adminId": admin.id, "email": admin.email, "name": admin.name}
    )

def verify_token(token: str) -> Optional[TokenData]:
    """Decode a token; None if the signature, expiry or claims are invalid."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info("Rejected token: %s", e)
        return None

    admin_id = payload.get("adminId") or payload.get("sub")
    if admin_id is None:
        return None
    return TokenData(admin_id=admin_id, email=payload.get("email"), name=payload.get("name"))

def authenticate_token(db: Session, token: Optional[str]) -> Admin:
    """Resolve a bearer token to its admin, or raise 401."""
    credentials_exception = AuthException(
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if token is None:
        raise credentials_exception

    token_data = verify_token(token)
    if token_data is None:
        raise credentials_exception

    admin = db.query(Admin).filter(Admin.id == token_data.admin_id).first()
    if admin is None:
        raise credentials_exception

    return admin
