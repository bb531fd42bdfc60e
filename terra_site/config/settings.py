"""
Site configuration settings
"""
import os


class SiteConfig:
    """Centralized configuration for the landing site"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    TESTING = False

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = "100 per minute"

    # Server
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', 8080))

    # Site identity
    SITE_NAME = "Terra Finance Edu"
    SITE_URL = "https://terrafinanceedu.com/"
    SITE_TITLE = "Terra Finance Edu | Learn Personal Finance with Clear Lessons and Tools"
    SITE_DESCRIPTION = (
        "Learn personal finance step by step. Terra Finance Edu teaches budgeting, saving, "
        "credit, investing, and taxes with clear lessons, interactive labs, and simple tools."
    )
    SITE_KEYWORDS = (
        "personal finance education, budgeting basics, saving money, credit score explained, "
        "beginner investing, financial literacy, finance lessons, money tools, "
        "compound interest calculator"
    )
    # The WebSite node carries its own, shorter description
    WEBSITE_DESCRIPTION = (
        "Learn personal finance step by step. Budgeting, saving, credit, investing, and taxes "
        "with clear lessons, interactive labs, and simple tools."
    )
    ROBOTS = "index, follow, max-image-preview:large"
    THEME_COLOR = "#0B1B2B"  # dark navy
    OG_IMAGE = SITE_URL + "og-image.jpg"
    LOGO_URL = SITE_URL + "logo.png"
    SEARCH_TARGET = SITE_URL + "?q={search_term_string}"

    # Footer text when the context provider has no message
    FOOTER_FALLBACK = "Clear personal finance education"

    # Context provider
    CONTEXT_MESSAGE = os.environ.get('VALUE_FROM_EXPRESS') or None
    CONTEXT_MESSAGE_URL = os.environ.get('CONTEXT_MESSAGE_URL') or None
    CONTEXT_TIMEOUT = float(os.environ.get('CONTEXT_TIMEOUT', 2))


class TestingConfig(SiteConfig):
    """Configuration used by the test suite"""

    TESTING = True
    RATELIMIT_ENABLED = False
    CONTEXT_MESSAGE = None
    CONTEXT_MESSAGE_URL = None
