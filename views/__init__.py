"""
Views layer - UI presentation components.
"""

from views.root_view import RootView

__all__ = ["RootView"]
