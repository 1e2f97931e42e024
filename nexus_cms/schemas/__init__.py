from .common import *
from .auth import *
from .product import *
from .sections import *
from .submissions import *
from .site_settings import *

__all__ = [
    # Common
    "CamelModel", "validate_payload",

    # Auth
    "Login", "AdminCreate", "TokenData", "AdminSummary", "AdminProfile",
    "LoginResponse", "AdminCreatedResponse",

    # Product
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse",

    # Sections
    "HeroSectionBase", "HeroSectionCreate", "HeroSectionUpdate", "HeroSectionResponse",
    "TestimonialBase", "TestimonialCreate", "TestimonialUpdate", "TestimonialResponse",
    "WhyChooseUsCreate", "WhyChooseUsUpdate", "WhyChooseUsResponse",
    "BookDemoSectionBase", "BookDemoSectionCreate", "BookDemoSectionUpdate", "BookDemoSectionResponse",

    # Submissions
    "StatusUpdate",
    "DemoRequestCreate", "DemoRequestResponse",
    "ContactCreate", "ContactResponse",
    "JobApplicationCreate", "JobApplicationResponse",

    # Site settings
    "SettingUpsert", "SettingUpdate", "SettingResponse",
]
