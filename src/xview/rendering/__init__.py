"""
Rendering: expression evaluation, attribute bags, slots and the expansion engine.
"""

from xview.rendering.attribute_bag import ComponentAttributes, RenderedAttribute
from xview.rendering.engine import ExpansionEngine
from xview.rendering.evaluator import ExpressionEvaluator, JinjaExpressionEvaluator
from xview.rendering.slots import Slot

__all__ = [
    "ExpansionEngine",
    "ExpressionEvaluator",
    "JinjaExpressionEvaluator",
    "ComponentAttributes",
    "RenderedAttribute",
    "Slot",
]
