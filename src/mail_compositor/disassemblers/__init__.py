"""Splitting composites into documents."""

from .disassembler import Disassembler

__all__ = ["Disassembler"]
