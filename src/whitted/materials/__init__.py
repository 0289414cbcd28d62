"""Materials module for surface shading.

Components:
    material: Phong material with reflection/refraction coefficients
    pattern: Procedural color patterns (stripe, gradient, ring, checkers)

Patterns are evaluated in their own space, derived from the shape's object
space, so moving a shape carries its texture with it.
"""

from .material import Material
from .pattern import (
    CheckersPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
    TestPattern,
)

__all__ = [
    "Material",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckersPattern",
    "TestPattern",
]
