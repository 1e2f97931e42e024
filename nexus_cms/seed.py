"""Create the tables and the default admin.

    python -m nexus_cms.seed
"""
import logging
import sys

from sqlalchemy.orm import Session

from nexus_cms.config import settings
from nexus_cms.core.security import get_password_hash
from nexus_cms.database import Database
from nexus_cms.models.admin import Admin

logger = logging.getLogger(__name__)


def seed_admin(db: Session, email: str, name: str, password: str) -> Admin:
    """Insert the admin unless one with ``email`` exists; an existing row is left as is."""
    admin = db.query(Admin).filter(Admin.email == email).first()
    if admin is not None:
        logger.info("Admin %s already exists", email)
        return admin

    admin = Admin(email=email, name=name, password=get_password_hash(password))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Default admin %s created", email)
    return admin


def main() -> int:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(message)s")
    database = Database(settings.DATABASE_URL)
    try:
        database.create_all()
        db = database.session()
        try:
            seed_admin(db, settings.SEED_ADMIN_EMAIL, settings.SEED_ADMIN_NAME, settings.SEED_ADMIN_PASSWORD)
        finally:
            db.close()
    except Exception:
        logger.exception("Seed failed")
        return 1
    finally:
        database.close()

    logger.info("Seed completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
