"""Directive macro system: grammar, registry, handlers, and expansion."""

from .expander import DirectiveContext, expand
from .grammar import DirectiveParseError, parse_reference
from .handlers import build_default_registry
from .math import MathRenderer, render_math
from .registry import BlockDirective, Directive, DirectiveRegistry, ValueDirective

__all__ = [
    "BlockDirective",
    "Directive",
    "DirectiveContext",
    "DirectiveParseError",
    "DirectiveRegistry",
    "MathRenderer",
    "ValueDirective",
    "build_default_registry",
    "expand",
    "parse_reference",
    "render_math",
]
