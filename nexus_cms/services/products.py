import re
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from nexus_cms.models.base import utcnow
from nexus_cms.models.product import Product
from nexus_cms.schemas.product import ProductCreate, ProductUpdate
from nexus_cms.services import crud

PUBLISHED = "published"

# isFeatured desc, order asc, createdAt desc
PRODUCT_ORDER = (Product.is_featured.desc(), Product.order.asc(), Product.created_at.desc())


def slugify_title(title: str) -> str:
    """Lower-case the title and collapse each whitespace run into one hyphen.

    No uniqueness check: two products with the same title share a slug.
    """
    return re.sub(r"\s+", "-", title.lower())


def create_product(db: Session, payload: ProductCreate) -> Product:
    data = payload.model_dump()
    data["slug"] = data.get("slug") or slugify_title(payload.title)
    data["published_at"] = utcnow() if payload.status == PUBLISHED else None
    return crud.create(db, Product, data)


def update_product(db: Session, product_id: str, payload: ProductUpdate) -> Product:
    changes = payload.model_dump(exclude_unset=True)
    product = crud.fetch_or_404(db, Product, product_id, "Product")

    # Stamped on the first transition into published only. Read-then-write
    # without a lock: two concurrent publishes may both stamp.
    if changes.get("status") == PUBLISHED and product.status != PUBLISHED:
        changes["published_at"] = utcnow()

    return crud.apply_changes(db, product, changes)


def list_products(db: Session, category: str = None, status: str = None, featured: str = None) -> List[Product]:
    filters: Dict[str, Any] = {}
    if category:
        filters["category"] = category
    if status:
        filters["status"] = status
    if featured == "true":
        filters["is_featured"] = True
    return crud.list_records(db, Product, PRODUCT_ORDER, filters)


def published_categories(db: Session) -> List[Dict[str, Any]]:
    rows = (
        db.query(Product.category, func.count(Product.category))
        .filter(Product.category.isnot(None), Product.status == PUBLISHED)
        .group_by(Product.category)
        .order_by(Product.category.asc())
        .all()
    )
    return [{"category": category, "_count": {"category": count}} for category, count in rows]
