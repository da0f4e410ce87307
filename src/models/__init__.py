"""
Models package for enerator

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .events import Event, EventKind, FENCE, InsideBlock, OutsideBlock
from .catalog import SyntaxEntry

__all__ = [
    "ProgramState",
    "pipeline",
    "Event",
    "EventKind",
    "FENCE",
    "InsideBlock",
    "OutsideBlock",
    "SyntaxEntry",
]
