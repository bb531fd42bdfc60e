"""
SEO Component
Builds the page metadata tags and the schema.org structured data
"""

from .service import SeoService, build_meta_tags, build_structured_data

__all__ = ['SeoService', 'build_meta_tags', 'build_structured_data']
