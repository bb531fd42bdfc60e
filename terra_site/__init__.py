"""
Terra Finance Edu landing site
"""
from .site_app import SiteApp, create_app

__all__ = ['SiteApp', 'create_app']
