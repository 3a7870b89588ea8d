"""
Domain model комплексного числа.

Содержит тип Complex, резолвер точности, рендеринг и функциональный API.
"""

from src.core.domain.complex_value import Complex
from src.core.domain.operations import (
    add,
    arg,
    complex_number,
    conj,
    cos,
    div,
    eq,
    expi,
    from_polar,
    is_close,
    modulus,
    mul,
    neg,
    power,
    sin,
    sq_abs,
    sqrt,
    sub,
)
from src.core.domain.precision import (
    DEFAULT_PRECISION,
    Precision,
    PrecisionError,
    resolve_binary,
    resolve_construction,
    resolve_with_scalar,
    scalar_precision,
    widest,
)
from src.core.domain.rendering import (
    SUPPORTED_FORMAT_CHARS,
    ComplexFormatter,
    FormatSpec,
    RenderConfig,
)

__all__ = [
    # Complex value
    "Complex",
    # Precision
    "DEFAULT_PRECISION",
    "Precision",
    "PrecisionError",
    "resolve_binary",
    "resolve_construction",
    "resolve_with_scalar",
    "scalar_precision",
    "widest",
    # Rendering
    "SUPPORTED_FORMAT_CHARS",
    "ComplexFormatter",
    "FormatSpec",
    "RenderConfig",
    # Operations: Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "power",
    "neg",
    "eq",
    # Operations: Polar
    "modulus",
    "sq_abs",
    "arg",
    "conj",
    "from_polar",
    "complex_number",
    # Operations: Elementary
    "expi",
    "sqrt",
    "sin",
    "cos",
    # Operations: Comparison
    "is_close",
]
