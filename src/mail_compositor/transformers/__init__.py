"""Page transformers."""

from .footer_annotator import FooterAnnotator, footer_text
from .transformer import PageTransformer

__all__ = ["PageTransformer", "FooterAnnotator", "footer_text"]
