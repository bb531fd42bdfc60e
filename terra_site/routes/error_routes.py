"""
Error handlers
"""
import logging

from flask import render_template

from terra_site.core.errors import ContextUnavailableError

logger = logging.getLogger(__name__)


def handle_context_unavailable(error):
    logger.exception("Landing page render failed: %s", error)
    return render_template('errors/503.html'), 503


def init_error_handlers(app):
    """Register error handlers with Flask app"""
    app.register_error_handler(ContextUnavailableError, handle_context_unavailable)
