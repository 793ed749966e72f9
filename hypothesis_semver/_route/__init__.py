"""
Generation routes: structured values or strings, behind one interface.
"""

from .interface import Candidate, GenerationRoute
from .structural import StructuralRoute
from .text import StringRoute

ROUTES: tuple[GenerationRoute, ...] = (StructuralRoute(), StringRoute())

__all__ = [
    "ROUTES",
    "Candidate",
    "GenerationRoute",
    "StringRoute",
    "StructuralRoute",
]
