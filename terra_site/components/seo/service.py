"""
SEO Service
Metadata tags and JSON-LD structured data for search engines and link previews
"""
from flask import current_app

SCHEMA_CONTEXT = "https://schema.org"


def _site_config(config):
    return current_app.config if config is None else config


def build_meta_tags(config=None):
    """Build the ordered list of head metadata tags

    ``config`` is a Flask config mapping; defaults to the active app's.
    Each entry is a dict with either a ``title`` key, or a ``name``/``property``
    key plus ``content``.
    """
    config = _site_config(config)
    title = config['SITE_TITLE']
    description = config['SITE_DESCRIPTION']
    url = config['SITE_URL']

    return [
        {'title': title},
        {'name': 'description', 'content': description},
        {'name': 'keywords', 'content': config['SITE_KEYWORDS']},
        {'name': 'robots', 'content': config['ROBOTS']},
        {'property': 'og:title', 'content': title},
        {'property': 'og:description', 'content': description},
        {'property': 'og:type', 'content': 'website'},
        {'property': 'og:url', 'content': url},
        {'property': 'og:image', 'content': config['OG_IMAGE']},
        {'name': 'twitter:card', 'content': 'summary_large_image'},
        {'name': 'twitter:title', 'content': title},
        {'name': 'twitter:description', 'content': description},
        {'name': 'theme-color', 'content': config['THEME_COLOR']},
    ]


def build_structured_data(faqs, config=None):
    """Assemble the WebSite, Organization and FAQPage graph

    FAQ entries map one-to-one, in order, onto FAQPage questions.
    """
    config = _site_config(config)
    website = {
        '@type': 'WebSite',
        'name': config['SITE_NAME'],
        'url': config['SITE_URL'],
        'description': config['WEBSITE_DESCRIPTION'],
        'potentialAction': {
            '@type': 'SearchAction',
            'target': config['SEARCH_TARGET'],
            'query-input': 'required name=search_term_string',
        },
    }
    organization = {
        '@type': 'Organization',
        'name': config['SITE_NAME'],
        'url': config['SITE_URL'],
        'logo': config['LOGO_URL'],
    }
    faq_page = {
        '@type': 'FAQPage',
        'mainEntity': [
            {
                '@type': 'Question',
                'name': faq['question'],
                'acceptedAnswer': {'@type': 'Answer', 'text': faq['answer']},
            }
            for faq in faqs
        ],
    }

    return {
        '@context': SCHEMA_CONTEXT,
        '@graph': [website, organization, faq_page],
    }


class SeoService:
    """Service for SEO component

    Reads site settings from the given config mapping, or from the active
    app's config when none is given.
    """

    def __init__(self, config=None):
        self._config = config

    @property
    def config(self):
        return _site_config(self._config)

    def get_meta_tags(self):
        return build_meta_tags(self.config)

    def get_structured_data(self, faqs):
        return build_structured_data(faqs, self.config)
