"""Base class for message body renderers."""

from abc import ABC, abstractmethod
from typing import Any


class Renderer(ABC):
    """Abstract renderer turning a message into PDF bytes.

    Rendering happens outside the engine; implementations wrap whatever
    HTML-to-PDF tool the host application uses. The engine only requires
    the returned bytes to be a PDF.
    """

    @abstractmethod
    def render(self, message: Any) -> bytes:
        """Render a message body.

        Args:
            message: The host application's message object

        Returns:
            PDF bytes for the body
        """
        pass
