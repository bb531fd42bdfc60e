"""
Site-wide routes
"""
from .health_routes import health_bp
from .error_routes import init_error_handlers

__all__ = ['health_bp', 'init_error_handlers']
