"""Base class for page compilers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from mail_compositor.pages import PageSequence


class Compiler(ABC):
    """Abstract base class for compilers.

    Compilers combine several page sequences into one composite, leaving the
    inputs untouched.
    """

    @abstractmethod
    def merge(
        self, body: PageSequence, attachments: Sequence[PageSequence]
    ) -> PageSequence:
        """Combine a body and its attachments.

        Args:
            body: Pages of the rendered message body
            attachments: Attachment page sequences in merge order

        Returns:
            A new PageSequence holding all pages
        """
        pass
