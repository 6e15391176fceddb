"""
Shared utilities (NOT business logic).

Usage:
    from wa_points.shared import WriteOnce
"""
from .once import WriteOnce

__all__ = ["WriteOnce"]
