from .admin import Admin
from .hero_section import HeroSection
from .product import Product
from .testimonial import Testimonial
from .why_choose_us import WhyChooseUsItem
from .book_demo import BookDemoSection
from .demo_request import DemoRequest
from .contact import Contact
from .job_application import JobApplication
from .site_settings import SiteSettings

__all__ = [
    "Admin", "HeroSection", "Product", "Testimonial", "WhyChooseUsItem",
    "BookDemoSection", "DemoRequest", "Contact", "JobApplication", "SiteSettings"
]
