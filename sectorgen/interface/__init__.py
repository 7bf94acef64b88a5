"""Text rendering and terminal interface for sectors."""

from .renderer import SectorRenderer

__all__ = ["SectorRenderer"]
