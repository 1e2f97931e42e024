# nexus_cms/config.py

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./nexus.db"

    # JWT
    SECRET_KEY: str = "your-secret-key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    BCRYPT_ROUNDS: int = 12

    # Supabase storage (service_role key, uploads need write access)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_KEY: Optional[str] = None
    SUPABASE_BUCKET: str = "nexus"
    UPLOAD_MAX_SIZE_MB: int = 50

    # Resend notifications, disabled unless both the key and a recipient are set
    RESEND_API_KEY: Optional[str] = None
    SENDER_EMAIL: str = "Nexus <no-reply@nexus.com>"
    NOTIFY_EMAIL: Optional[str] = None

    # Default admin created by `python -m nexus_cms.seed`
    SEED_ADMIN_EMAIL: str = "admin@nexus.com"
    SEED_ADMIN_NAME: str = "Admin User"
    SEED_ADMIN_PASSWORD: str = "admin123"

    # CORS
    FRONTEND_URLS: str = "http://localhost:3001"

    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        return [url.strip() for url in self.FRONTEND_URLS.split(",") if url.strip()]

    @property
    def storage_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_KEY)

    class Config:
        env_file = ".env"

settings = Settings()
