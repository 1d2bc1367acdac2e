"""Equipment registry service package."""

__all__ = []
