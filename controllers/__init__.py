"""
Controllers layer - orchestration and session state management.
"""

from controllers.root_controller import RootController

__all__ = ["RootController"]
