import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type

from fastapi import APIRouter, BackgroundTasks, Body, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from nexus_cms.core.dispatch import require_id, resolve_action, run_action
from nexus_cms.core.email_service import notify_submission
from nexus_cms.database import get_db
from nexus_cms.models import (
    BookDemoSection, Contact, DemoRequest, HeroSection, JobApplication,
    Product, SiteSettings, Testimonial, WhyChooseUsItem,
)
from nexus_cms.models.base import BaseModel
from nexus_cms.schemas import (
    BookDemoSectionCreate, BookDemoSectionResponse, BookDemoSectionUpdate,
    ContactCreate, ContactResponse,
    DemoRequestCreate, DemoRequestResponse,
    HeroSectionCreate, HeroSectionResponse, HeroSectionUpdate,
    JobApplicationCreate, JobApplicationResponse,
    ProductCreate, ProductResponse, ProductUpdate,
    SettingResponse, SettingUpdate, SettingUpsert, StatusUpdate,
    TestimonialCreate, TestimonialResponse, TestimonialUpdate,
    WhyChooseUsCreate, WhyChooseUsResponse, WhyChooseUsUpdate,
    validate_payload,
)
from nexus_cms.schemas.common import CamelModel
from nexus_cms.services import crud, products

router = APIRouter()


class ContentAction(str, Enum):
    # Hero section
    GET_HERO = "get-hero"
    CREATE_HERO = "create-hero"
    UPDATE_HERO = "update-hero"
    DELETE_HERO = "delete-hero"

    # Products
    GET_PRODUCTS = "get-products"
    GET_PRODUCT_CATEGORIES = "get-product-categories"
    CREATE_PRODUCT = "create-product"
    UPDATE_PRODUCT = "update-product"
    DELETE_PRODUCT = "delete-product"

    # Testimonials
    GET_TESTIMONIALS = "get-testimonials"
    CREATE_TESTIMONIAL = "create-testimonial"
    UPDATE_TESTIMONIAL = "update-testimonial"
    DELETE_TESTIMONIAL = "delete-testimonial"

    # Why choose us
    GET_WHY_CHOOSE_US = "get-why-choose-us"
    CREATE_WHY_CHOOSE_US = "create-why-choose-us"
    UPDATE_WHY_CHOOSE_US = "update-why-choose-us"
    DELETE_WHY_CHOOSE_US = "delete-why-choose-us"

    # Book demo section
    GET_BOOK_DEMO = "get-book-demo"
    CREATE_BOOK_DEMO = "create-book-demo"
    UPDATE_BOOK_DEMO = "update-book-demo"
    DELETE_BOOK_DEMO = "delete-book-demo"

    # Demo requests
    GET_DEMO_REQUESTS = "get-demo-requests"
    CREATE_DEMO_REQUEST = "create-demo-request"
    UPDATE_DEMO_REQUEST = "update-demo-request"
    DELETE_DEMO_REQUEST = "delete-demo-request"

    # Contacts
    GET_CONTACTS = "get-contacts"
    CREATE_CONTACT = "create-contact"
    UPDATE_CONTACT = "update-contact"
    DELETE_CONTACT = "delete-contact"

    # Job applications
    GET_JOB_APPLICATIONS = "get-job-applications"
    GET_APPLICATIONS_BY_POSITION = "get-applications-by-position"
    CREATE_JOB_APPLICATION = "create-job-application"
    UPDATE_JOB_APPLICATION = "update-job-application"
    DELETE_JOB_APPLICATION = "delete-job-application"

    # Site settings
    GET_SETTINGS = "get-settings"
    CREATE_SETTING = "create-setting"
    UPDATE_SETTING = "update-setting"
    DELETE_SETTING = "delete-setting"

    # Dashboard
    GET_STATS = "get-stats"


@dataclass
class ReadQuery:
    id: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    featured: Optional[str] = None
    key: Optional[str] = None
    position: Optional[str] = None


# =======================================================
# Handler factories for the families with no special rules
# =======================================================

def _reader(model: Type[BaseModel], response: Type[CamelModel], order_by: Tuple = ()) -> Callable:
    def read(db: Session, query: ReadQuery):
        if query.id:
            record = crud.fetch(db, model, query.id)
            return response.model_validate(record) if record else None
        return [response.model_validate(r) for r in crud.list_records(db, model, order_by)]
    return read


def _creator(
    model: Type[BaseModel],
    schema: Type[CamelModel],
    response: Type[CamelModel],
    notify_as: Optional[str] = None,
) -> Callable:
    def create(db: Session, body: Any, tasks: BackgroundTasks):
        payload = validate_payload(schema, body)
        record = crud.create(db, model, payload.model_dump())
        if notify_as:
            tasks.add_task(notify_submission, notify_as, _summary(payload))
        return response.model_validate(record)
    return create


def _updater(model: Type[BaseModel], schema: Type[CamelModel], response: Type[CamelModel], label: str) -> Callable:
    def update(db: Session, record_id: str, body: Any):
        payload = validate_payload(schema, body)
        record = crud.update(db, model, record_id, payload.model_dump(exclude_unset=True), label)
        return response.model_validate(record)
    return update


def _deleter(model: Type[BaseModel], label: str) -> Callable:
    def delete(db: Session, record_id: str):
        crud.delete(db, model, record_id, label)
        return {"message": f"{label} deleted"}
    return delete


def _summary(payload: CamelModel) -> Dict[str, Any]:
    return {
        name.replace("_", " ").capitalize(): value
        for name, value in payload.model_dump(exclude={"status"}).items()
    }


# =======================================================
# Handlers with family-specific behaviour
# =======================================================

def get_products(db: Session, query: ReadQuery):
    if query.id:
        product = crud.fetch(db, Product, query.id)
        return ProductResponse.model_validate(product) if product else None
    found = products.list_products(db, category=query.category, status=query.status, featured=query.featured)
    return [ProductResponse.model_validate(p) for p in found]


def get_product_categories(db: Session, query: ReadQuery):
    return products.published_categories(db)


def create_product(db: Session, body: Any, tasks: BackgroundTasks):
    product = products.create_product(db, validate_payload(ProductCreate, body))
    return ProductResponse.model_validate(product)


def update_product(db: Session, record_id: str, body: Any):
    product = products.update_product(db, record_id, validate_payload(ProductUpdate, body))
    return ProductResponse.model_validate(product)


def get_applications_by_position(db: Session, query: ReadQuery):
    filters = {}
    if query.position:
        filters["position"] = query.position
    if query.status:
        filters["status"] = query.status
    found = crud.list_records(db, JobApplication, (JobApplication.created_at.desc(),), filters)
    return [JobApplicationResponse.model_validate(a) for a in found]


def get_settings(db: Session, query: ReadQuery):
    if query.key:
        setting = db.query(SiteSettings).filter(SiteSettings.key == query.key).first()
        return SettingResponse.model_validate(setting) if setting else None
    found = crud.list_records(db, SiteSettings, (SiteSettings.key.asc(),))
    return [SettingResponse.model_validate(s) for s in found]


def upsert_setting(db: Session, body: Any, tasks: BackgroundTasks):
    payload = validate_payload(SettingUpsert, body)
    setting = db.query(SiteSettings).filter(SiteSettings.key == payload.key).first()
    if setting is None:
        setting = crud.create(db, SiteSettings, payload.model_dump())
    else:
        setting = crud.apply_changes(db, setting, {"value": payload.value, "description": payload.description})
    return SettingResponse.model_validate(setting)


async def get_stats(db: Session, query: ReadQuery):
    engine = db.get_bind()

    def count(model, *criteria) -> int:
        # One session per query so the four counts can run side by side
        with Session(bind=engine) as session:
            return session.query(func.count(model.id)).filter(*criteria).scalar()

    total_products, total_testimonials, total_requests, pending = await asyncio.gather(
        run_in_threadpool(count, Product),
        run_in_threadpool(count, Testimonial),
        run_in_threadpool(count, DemoRequest),
        run_in_threadpool(count, DemoRequest, DemoRequest.status == "pending"),
    )
    return {
        "totalProducts": total_products,
        "totalTestimonials": total_testimonials,
        "totalDemoRequests": total_requests,
        "pendingRequests": pending,
    }


# =======================================================
# Dispatch tables, one per verb
# =======================================================

GET_HANDLERS: Dict[ContentAction, Callable] = {
    ContentAction.GET_HERO: _reader(HeroSection, HeroSectionResponse, (HeroSection.updated_at.desc(),)),
    ContentAction.GET_PRODUCTS: get_products,
    ContentAction.GET_PRODUCT_CATEGORIES: get_product_categories,
    ContentAction.GET_TESTIMONIALS: _reader(Testimonial, TestimonialResponse, (Testimonial.order.asc(),)),
    ContentAction.GET_WHY_CHOOSE_US: _reader(WhyChooseUsItem, WhyChooseUsResponse, (WhyChooseUsItem.order.asc(),)),
    ContentAction.GET_BOOK_DEMO: _reader(
        BookDemoSection, BookDemoSectionResponse, (BookDemoSection.updated_at.desc(),)
    ),
    ContentAction.GET_DEMO_REQUESTS: _reader(
        DemoRequest, DemoRequestResponse, (DemoRequest.created_at.desc(),)
    ),
    ContentAction.GET_CONTACTS: _reader(Contact, ContactResponse, (Contact.created_at.desc(),)),
    ContentAction.GET_JOB_APPLICATIONS: _reader(
        JobApplication, JobApplicationResponse, (JobApplication.created_at.desc(),)
    ),
    ContentAction.GET_APPLICATIONS_BY_POSITION: get_applications_by_position,
    ContentAction.GET_SETTINGS: get_settings,
    ContentAction.GET_STATS: get_stats,
}

POST_HANDLERS: Dict[ContentAction, Callable] = {
    ContentAction.CREATE_HERO: _creator(HeroSection, HeroSectionCreate, HeroSectionResponse),
    ContentAction.CREATE_PRODUCT: create_product,
    ContentAction.CREATE_TESTIMONIAL: _creator(Testimonial, TestimonialCreate, TestimonialResponse),
    ContentAction.CREATE_WHY_CHOOSE_US: _creator(WhyChooseUsItem, WhyChooseUsCreate, WhyChooseUsResponse),
    ContentAction.CREATE_BOOK_DEMO: _creator(BookDemoSection, BookDemoSectionCreate, BookDemoSectionResponse),
    ContentAction.CREATE_DEMO_REQUEST: _creator(
        DemoRequest, DemoRequestCreate, DemoRequestResponse, notify_as="demo request"
    ),
    ContentAction.CREATE_CONTACT: _creator(Contact, ContactCreate, ContactResponse, notify_as="contact message"),
    ContentAction.CREATE_JOB_APPLICATION: _creator(
        JobApplication, JobApplicationCreate, JobApplicationResponse, notify_as="job application"
    ),
    ContentAction.CREATE_SETTING: upsert_setting,
}

PUT_HANDLERS: Dict[ContentAction, Callable] = {
    ContentAction.UPDATE_HERO: _updater(HeroSection, HeroSectionUpdate, HeroSectionResponse, "Hero section"),
    ContentAction.UPDATE_PRODUCT: update_product,
    ContentAction.UPDATE_TESTIMONIAL: _updater(Testimonial, TestimonialUpdate, TestimonialResponse, "Testimonial"),
    ContentAction.UPDATE_WHY_CHOOSE_US: _updater(
        WhyChooseUsItem, WhyChooseUsUpdate, WhyChooseUsResponse, "Why Choose Us item"
    ),
    ContentAction.UPDATE_BOOK_DEMO: _updater(
        BookDemoSection, BookDemoSectionUpdate, BookDemoSectionResponse, "Book Demo section"
    ),
    ContentAction.UPDATE_DEMO_REQUEST: _updater(DemoRequest, StatusUpdate, DemoRequestResponse, "Demo request"),
    ContentAction.UPDATE_CONTACT: _updater(Contact, StatusUpdate, ContactResponse, "Contact"),
    ContentAction.UPDATE_JOB_APPLICATION: _updater(
        JobApplication, StatusUpdate, JobApplicationResponse, "Job application"
    ),
    ContentAction.UPDATE_SETTING: _updater(SiteSettings, SettingUpdate, SettingResponse, "Setting"),
}

DELETE_HANDLERS: Dict[ContentAction, Callable] = {
    ContentAction.DELETE_HERO: _deleter(HeroSection, "Hero section"),
    ContentAction.DELETE_PRODUCT: _deleter(Product, "Product"),
    ContentAction.DELETE_TESTIMONIAL: _deleter(Testimonial, "Testimonial"),
    ContentAction.DELETE_WHY_CHOOSE_US: _deleter(WhyChooseUsItem, "Why Choose Us item"),
    ContentAction.DELETE_BOOK_DEMO: _deleter(BookDemoSection, "Book Demo section"),
    ContentAction.DELETE_DEMO_REQUEST: _deleter(DemoRequest, "Demo request"),
    ContentAction.DELETE_CONTACT: _deleter(Contact, "Contact"),
    ContentAction.DELETE_JOB_APPLICATION: _deleter(JobApplication, "Job application"),
    ContentAction.DELETE_SETTING: _deleter(SiteSettings, "Setting"),
}


# =======================================================
# Endpoints
# =======================================================

@router.get("")
async def handle_get(
    action: Optional[str] = None,
    id: Optional[str] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
    featured: Optional[str] = None,
    key: Optional[str] = None,
    position: Optional[str] = None,
    db: Session = Depends(get_db),
):
    """Read one record by ``id`` or list a family, filtered and sorted per action."""
    handler = resolve_action(action, ContentAction, GET_HANDLERS)
    query = ReadQuery(id=id, category=category, status=status, featured=featured, key=key, position=position)
    return await run_action("GET", action, handler, db, query)


@router.post("")
async def handle_post(
    background_tasks: BackgroundTasks,
    action: Optional[str] = None,
    body: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    handler = resolve_action(action, ContentAction, POST_HANDLERS)
    return await run_action("POST", action, handler, db, body, background_tasks)


@router.put("")
async def handle_put(
    action: Optional[str] = None,
    id: Optional[str] = Query(None),
    body: Optional[Dict[str, Any]] = Body(None),
    db: Session = Depends(get_db),
):
    record_id = require_id(id)
    handler = resolve_action(action, ContentAction, PUT_HANDLERS)
    return await run_action("PUT", action, handler, db, record_id, body)


@router.delete("")
async def handle_delete(
    action: Optional[str] = None,
    id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    record_id = require_id(id)
    handler = resolve_action(action, ContentAction, DELETE_HANDLERS)
    return await run_action("DELETE", action, handler, db, record_id)
