"""
Home Service
Loader and page assembly for the landing page
"""
import logging
from datetime import datetime, timezone

from flask import current_app

from terra_site.components.seo import SeoService
from terra_site.core import content
from terra_site.core.context_provider import ContextProvider

logger = logging.getLogger(__name__)


def format_last_updated(now_iso):
    """Format an ISO timestamp as an en-US date (M/D/YYYY) with no time component"""
    date = datetime.fromisoformat(now_iso).date()
    return f"{date.month}/{date.day}/{date.year}"


class HomeService:
    """Service for the landing page

    Site settings come from ``config`` when given, otherwise from the
    active app's config at call time.
    """

    def __init__(self, config=None, seo_service=None):
        self._config = config
        self.seo = seo_service or SeoService(config)

    @property
    def config(self):
        return current_app.config if self._config is None else self._config

    def load(self, provider=None):
        """Fetch the context message and the current timestamp

        Both values are returned as-is; provider failures propagate.
        """
        if provider is None:
            provider = ContextProvider.from_config(self.config)

        return {
            'message': provider.get_message(),
            'now_iso': datetime.now(timezone.utc).isoformat(),
        }

    def build_page(self, loaded, now=None):
        """Build the template context for the landing page

        ``now`` is the render clock (UTC, the loader's clock) used for the
        copyright year.
        """
        if now is None:
            now = datetime.now(timezone.utc)

        faqs = content.get_faqs()
        message = loaded.get('message')

        page = {
            'meta_tags': self.seo.get_meta_tags(),
            'structured_data': self.seo.get_structured_data(faqs),
            'site_name': self.config['SITE_NAME'],
            'last_updated': format_last_updated(loaded['now_iso']),
            'quick_start_steps': content.get_quick_start_steps(),
            'pillars': content.get_pillars(),
            'topics': content.get_topics(),
            'labs': content.get_labs(),
            'tools': content.get_tools(),
            'audiences': content.get_audiences(),
            'why_it_works': content.get_why_it_works(),
            'badges': content.get_badges(),
            'faqs': faqs,
            'message': message or None,
            'footer_text': message or self.config['FOOTER_FALLBACK'],
            'current_year': now.year,
        }
        logger.debug("Built landing page (message present: %s)", bool(message))
        return page
