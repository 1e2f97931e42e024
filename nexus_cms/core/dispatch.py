"""Action dispatch shared by the REST handlers.

Every endpoint reads an ``action`` string, resolves it against a closed enum,
looks the member up in the verb's handler table and runs exactly one handler.
Handler failures are translated here, at the boundary, into HTTP errors.
"""
import inspect
import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from nexus_cms.core.exceptions import BadRequestException, ConflictException, InternalServerError

logger = logging.getLogger(__name__)

ActionT = TypeVar("ActionT", bound=Enum)


def resolve_action(action: Optional[str], enum: Type[ActionT], table: Dict[ActionT, Callable]) -> Callable:
    """Return the handler bound to ``action`` for this verb, or raise 400."""
    try:
        member = enum(action)
    except ValueError:
        raise BadRequestException("Invalid action")

    handler = table.get(member)
    if handler is None:
        raise BadRequestException("Invalid action")
    return handler


def require_id(record_id: Optional[str]) -> str:
    if not record_id:
        raise BadRequestException("ID is required")
    return record_id


async def run_action(verb: str, action: str, handler: Callable, db: Session, *args: Any) -> Any:
    """Run one handler and shape its result as JSON-ready data.

    Synchronous handlers go to the thread pool. HTTP errors raised by the
    handler pass through unchanged; unique-constraint violations become 409;
    anything else is logged in full and reported as an opaque 500.
    """
    try:
        if inspect.iscoroutinefunction(handler):
            result = await handler(db, *args)
        else:
            result = await run_in_threadpool(handler, db, *args)
    except HTTPException:
        raise
    except IntegrityError as e:
        await run_in_threadpool(db.rollback)
        logger.warning("%s %s violated a unique constraint: %s", verb, action, e.orig)
        raise ConflictException()
    except Exception:
        logger.exception("%s %s failed", verb, action)
        await run_in_threadpool(db.rollback)
        raise InternalServerError()

    return jsonable_encoder(result)
