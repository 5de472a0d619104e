"""
Base handler class for menu handlers.
"""

from ...ui.display import DisplayManager


class BaseHandler:
    """Base class for menu handlers."""

    def __init__(self, display_manager: DisplayManager):
        self.display_manager = display_manager
