"""Task complexity analysis."""

from .analyzer import ComplexityAnalyzer
from .breakdown import BreakdownGenerator
from .report import render_report
from .scorer import ComplexityScorer

__all__ = ['ComplexityAnalyzer', 'BreakdownGenerator', 'ComplexityScorer', 'render_report']
