"""
Home Routes
"""
from flask import Blueprint, render_template

from .service import HomeService

home_bp = Blueprint('home', __name__)

# Initialize service
service = HomeService()


@home_bp.route('/')
def index():
    """Landing page"""
    loaded = service.load()
    page = service.build_page(loaded)
    return render_template('home.html', **page)


def init_home(app):
    """Initialize home component with Flask app"""
    app.register_blueprint(home_bp, url_prefix='')
    return home_bp
