import json
from datetime import datetime, timezone

import requests
from bs4 import BeautifulSoup

from terra_site import create_app
from terra_site.components.home import format_last_updated
from terra_site.config.settings import SiteConfig, TestingConfig


def _structured_data(page):
    script = page.find('script', attrs={'type': 'application/ld+json'})
    return json.loads(script.string)


def test_visible_faq_matches_structured_data(page):
    items = page.select('#faq details')
    entities = _structured_data(page)['@graph'][2]['mainEntity']
    assert len(items) == len(entities) == 5
    for item, entity in zip(items, entities):
        assert item.find('summary').get_text(strip=True) == entity['name']
        assert item.find('div', class_='faq-answer').get_text(strip=True) == entity['acceptedAnswer']['text']


def test_structured_data_node_types(page):
    data = _structured_data(page)
    assert data['@context'] == 'https://schema.org'
    assert [node['@type'] for node in data['@graph']] == ['WebSite', 'Organization', 'FAQPage']


def test_head_title_and_description_pairs(page):
    title = page.title.string
    description = page.find('meta', attrs={'name': 'description'})['content']
    assert title == SiteConfig.SITE_TITLE
    assert description == SiteConfig.SITE_DESCRIPTION
    assert page.find('meta', attrs={'property': 'og:title'})['content'] == title
    assert page.find('meta', attrs={'property': 'og:description'})['content'] == description
    assert page.find('meta', attrs={'name': 'theme-color'})['content'] == '#0B1B2B'


def test_card_counts(page):
    assert len(page.select('#topics .topic-card')) == 6
    assert len(page.select('#labs .lab-card')) == 2
    assert len(page.select('#tools .tool-card')) == 3
    assert len(page.select('#pillars .pillar-card')) == 3
    assert len(page.select('#audiences article')) == 3


def test_footer_fallback_when_message_absent(page):
    footer = page.find('footer')
    assert footer.find('div', class_='footer-message').get_text(strip=True) == 'Clear personal finance education'
    assert footer.find('span', attrs={'aria-live': 'polite'}) is None


def test_footer_renders_message_verbatim(app, client):
    app.config['CONTEXT_MESSAGE'] = 'Budget week starts Monday <3'
    resp = client.get('/')
    page = BeautifulSoup(resp.get_data(as_text=True), 'html.parser')
    live = page.find('footer').find('span', attrs={'aria-live': 'polite'})
    assert live.get_text() == 'Budget week starts Monday <3'
    assert 'Clear personal finance education' not in page.find('footer').get_text()


def test_footer_message_from_upstream(app, client, monkeypatch):
    class Upstream:
        text = ''

        def raise_for_status(self):
            pass

        def json(self):
            return {'message': 'Fresh lessons this week'}

    monkeypatch.setattr(requests, 'get', lambda url, timeout: Upstream())
    app.config['CONTEXT_MESSAGE_URL'] = 'http://upstream.test/message'
    page = BeautifulSoup(client.get('/').get_data(as_text=True), 'html.parser')
    assert page.find('span', attrs={'aria-live': 'polite'}).get_text() == 'Fresh lessons this week'


def test_last_updated_banner_uses_current_date(client):
    before = datetime.now(timezone.utc).isoformat()
    page = BeautifulSoup(client.get('/').get_data(as_text=True), 'html.parser')
    after = datetime.now(timezone.utc).isoformat()
    banner = page.find(id='last-updated').get_text(strip=True)
    assert banner in {
        f'New modules arriving soon. Last updated {format_last_updated(before)}.',
        f'New modules arriving soon. Last updated {format_last_updated(after)}.',
    }


def test_copyright_year_is_current(page):
    copyright_text = page.find('div', class_='copyright').get_text(strip=True)
    assert copyright_text == f'© {datetime.now(timezone.utc).year} Terra Finance Edu'


def test_upstream_failure_returns_503(app, client, monkeypatch):
    def fake_get(url, timeout):
        raise requests.ConnectionError('refused')

    monkeypatch.setattr(requests, 'get', fake_get)
    app.config['CONTEXT_MESSAGE_URL'] = 'http://upstream.test/message'
    resp = client.get('/')
    assert resp.status_code == 503
    assert b'Service temporarily unavailable' in resp.data


def test_health(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json() == {'status': 'healthy', 'service': 'Terra Finance Edu'}


class BrandedConfig(TestingConfig):
    SITE_NAME = 'Terra Labs'
    SITE_TITLE = 'Terra Labs | Money Lessons'
    FOOTER_FALLBACK = 'Money made clear'


def test_page_uses_config_object_passed_to_factory():
    client = create_app(BrandedConfig).test_client()
    page = BeautifulSoup(client.get('/').get_data(as_text=True), 'html.parser')
    assert page.title.string == 'Terra Labs | Money Lessons'
    assert page.find('meta', attrs={'property': 'og:title'})['content'] == 'Terra Labs | Money Lessons'
    assert page.find('div', class_='footer-message').get_text(strip=True) == 'Money made clear'
    assert page.find('div', class_='copyright').get_text(strip=True).endswith('Terra Labs')
    organization = _structured_data(page)['@graph'][1]
    assert organization['name'] == 'Terra Labs'


class RateLimitedConfig(TestingConfig):
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = "2 per minute"


def test_default_rate_limit_is_enforced():
    client = create_app(RateLimitedConfig).test_client()
    assert client.get('/').status_code == 200
    assert client.get('/').status_code == 200
    assert client.get('/').status_code == 429
