"""
Site components
Each component exposes an init_* function that registers it with the app.
"""
from .home import init_home

COMPONENTS = [init_home]


def init_components(app):
    """Register every site component"""
    for init in COMPONENTS:
        init(app)


__all__ = ['COMPONENTS', 'init_components']
