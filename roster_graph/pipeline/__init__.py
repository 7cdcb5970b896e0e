"""
Roster graph analytics pipeline.
"""

from .nodes import create_pipeline


__all__ = ["create_pipeline"]
