"""
Home Component
Landing page loader, renderer and route
"""

from .routes import home_bp, init_home
from .service import HomeService, format_last_updated

__all__ = ['home_bp', 'init_home', 'HomeService', 'format_last_updated']
