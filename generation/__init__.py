"""Arithmetic question generation.

Architecture:
- RandomSource is the only source of variation; it is injected everywhere
- Each QuestionGenerator turns GameSettings into a QuestionCard for one
  category, with an integer path and a decimal (tenths) path
- build_options synthesizes the distinct, shuffled multiple-choice options
- CardFactory holds the category -> generator registry, filters it by the
  settings and dispatches single, random and batch generation

Generators:
- AdditionGenerator, SubtractionGenerator, MultiplicationGenerator,
  DivisionGenerator
"""

from generation.addition import AdditionGenerator
from generation.base import QuestionGenerator
from generation.config import OPTION_COUNT, DistractorConfig
from generation.division import DivisionGenerator
from generation.factory import CardFactory
from generation.formatting import (
    format_int,
    format_int_operand,
    format_tenths,
    format_tenths_operand,
)
from generation.multiplication import MultiplicationGenerator
from generation.options import build_options
from generation.rng import RandomSource
from generation.subtraction import SubtractionGenerator

__all__ = [
    # Randomness
    "RandomSource",
    # Configuration
    "DistractorConfig",
    "OPTION_COUNT",
    # Formatting and options
    "format_int",
    "format_int_operand",
    "format_tenths",
    "format_tenths_operand",
    "build_options",
    # Abstract classes
    "QuestionGenerator",
    # Generators
    "AdditionGenerator",
    "SubtractionGenerator",
    "MultiplicationGenerator",
    "DivisionGenerator",
    # Registry
    "CardFactory",
]
