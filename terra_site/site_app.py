"""
Terra Finance Edu landing site
Flask application factory and entry point
"""
import logging

from flask import Flask
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from terra_site.config.settings import SiteConfig
from terra_site.components import init_components
from terra_site.routes import health_bp, init_error_handlers

logger = logging.getLogger(__name__)


class SiteApp:
    """Main site application class"""

    def __init__(self, config_object=SiteConfig):
        self.app = None
        self.limiter = None
        self.config_object = config_object

    def create_app(self):
        """Create and configure Flask application"""
        self.app = Flask(__name__)

        # Load configuration
        self.app.config.from_object(self.config_object)

        # Initialize extensions
        self.limiter = Limiter(
            key_func=get_remote_address,
            app=self.app,
            default_limits=[self.app.config['RATELIMIT_DEFAULT']],
            storage_uri=self.app.config['RATELIMIT_STORAGE_URI'],
        )

        # Initialize components
        init_components(self.app)

        self.app.register_blueprint(health_bp)
        init_error_handlers(self.app)

        return self.app

    def run(self):
        """Start the site application"""
        host = self.app.config['HOST']
        port = self.app.config['PORT']

        logger.info("=" * 60)
        logger.info("%s landing site", self.app.config['SITE_NAME'])
        logger.info("Starting on: http://localhost:%s", port)
        logger.info("Endpoints:")
        logger.info("   - Home:      http://localhost:%s/", port)
        logger.info("   - Health:    http://localhost:%s/health", port)
        if self.app.config.get('CONTEXT_MESSAGE_URL'):
            logger.info("Context message source: %s", self.app.config['CONTEXT_MESSAGE_URL'])
        logger.info("=" * 60)

        self.app.run(host=host, port=port, debug=False)


def create_app(config_object=SiteConfig):
    """Build a configured Flask app"""
    return SiteApp(config_object).create_app()


def main():
    """Main entry point"""
    logging.basicConfig(level=logging.INFO)
    site = SiteApp()
    site.create_app()
    site.run()


if __name__ == '__main__':
    main()
