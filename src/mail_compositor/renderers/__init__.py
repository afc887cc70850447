"""Message body renderer contract."""

from .renderer import Renderer

__all__ = ["Renderer"]
