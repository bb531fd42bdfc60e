"""
Core services shared by site components
"""
from .errors import SiteError, ContextUnavailableError
from .context_provider import ContextProvider

__all__ = [
    'SiteError',
    'ContextUnavailableError',
    'ContextProvider',
]
