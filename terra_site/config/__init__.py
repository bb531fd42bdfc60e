from .settings import SiteConfig, TestingConfig

__all__ = ['SiteConfig', 'TestingConfig']
