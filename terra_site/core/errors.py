"""
Site exceptions
"""


class SiteError(Exception):
    """Base class for landing site errors"""


class ContextUnavailableError(SiteError):
    """The external context provider could not supply a message"""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f'Context provider unavailable ({source}): {reason}')
