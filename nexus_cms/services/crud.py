"""Persistence helpers shared by every entity family.

Each helper performs exactly one logical persistence operation on a session
handed in by the caller; nothing here keeps state between calls.
"""
from typing import Any, Dict, Iterable, List, Optional, Type

from sqlalchemy.orm import Session

from nexus_cms.core.exceptions import NotFoundException
from nexus_cms.models.base import BaseModel


def fetch(db: Session, model: Type[BaseModel], record_id: str) -> Optional[BaseModel]:
    return db.query(model).filter(model.id == record_id).first()


def fetch_or_404(db: Session, model: Type[BaseModel], record_id: str, label: str) -> BaseModel:
    record = fetch(db, model, record_id)
    if record is None:
        raise NotFoundException(f"{label} not found")
    return record


def list_records(
    db: Session,
    model: Type[BaseModel],
    order_by: Iterable[Any] = (),
    filters: Optional[Dict[str, Any]] = None,
) -> List[BaseModel]:
    """List ``model`` rows matching every ``filters`` entry (AND), in ``order_by`` order."""
    query = db.query(model)
    for field, value in (filters or {}).items():
        query = query.filter(getattr(model, field) == value)
    return query.order_by(*order_by).all()


def create(db: Session, model: Type[BaseModel], data: Dict[str, Any]) -> BaseModel:
    record = model(**data)
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def apply_changes(db: Session, record: BaseModel, changes: Dict[str, Any]) -> BaseModel:
    # Only the fields present in ``changes`` are touched
    for field, value in changes.items():
        setattr(record, field, value)
    db.commit()
    db.refresh(record)
    return record


def update(db: Session, model: Type[BaseModel], record_id: str, changes: Dict[str, Any], label: str) -> BaseModel:
    record = fetch_or_404(db, model, record_id, label)
    return apply_changes(db, record, changes)


def delete(db: Session, model: Type[BaseModel], record_id: str, label: str) -> None:
    record = fetch_or_404(db, model, record_id, label)
    db.delete(record)
    db.commit()
