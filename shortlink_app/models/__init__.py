"""
Database models for the link shortener.

A single table holds every link together with its click counter.
"""

from .link import Link

__all__ = ["Link"]
