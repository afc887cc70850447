"""Compilers for assembling composites."""

from .compiler import Compiler
from .merge_assembler import MergeAssembler, MergeOutcome

__all__ = ["Compiler", "MergeAssembler", "MergeOutcome"]
