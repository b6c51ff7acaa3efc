"""Core enums package.

Usage:
    from routeforge.core.enums import Environment
"""

from routeforge.core.enums.environment import Environment

__all__ = ["Environment"]
