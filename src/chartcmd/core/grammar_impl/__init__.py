"""
Concrete grammars for the chart command vocabulary.

ChartGrammar is the entry point; it recurses into FieldGrammar (which may
recurse into BinGrammar) and MarkGrammar.
"""

from .bin import BinGrammar
from .chart import ChartGrammar
from .field import FieldGrammar
from .mark import MarkGrammar, color_dispatch

__all__ = [
    "BinGrammar",
    "ChartGrammar",
    "FieldGrammar",
    "MarkGrammar",
    "color_dispatch",
]
