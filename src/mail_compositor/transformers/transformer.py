"""Base class for page transformers.

Page transformers take a PageSequence and return a new one; the input is
never modified. The FooterAnnotator is the engine's only transformer.
"""

from abc import ABC, abstractmethod

from mail_compositor.pages import PageSequence


class PageTransformer(ABC):
    """Abstract base class for non-destructive page transformations."""

    @abstractmethod
    def transform(self, pages: PageSequence) -> PageSequence:
        """Transform a page sequence.

        Args:
            pages: Sequence to read from (left unchanged)

        Returns:
            A new PageSequence
        """
        pass
