"""
Core math modules для комплексных чисел

Численные kernels на уровне компонент (re, im) с гарантией устойчивости
к overflow/underflow и корректным выбором ветви.
"""

# Arithmetic
from src.core.math.arithmetic import (
    add_parts,
    div_parts,
    mul_parts,
    rdiv_parts,
    scale_parts,
    sub_parts,
    unscale_parts,
)

# Polar
from src.core.math.polar import (
    argument_parts,
    from_polar_parts,
    modulus_parts,
    pi_of,
    sq_modulus_parts,
)

# Power
from src.core.math.power import (
    pow_complex_parts,
    pow_int_parts,
    pow_real_parts,
    rpow_parts,
)

# Elementary
from src.core.math.elementary import (
    coshisinh_parts,
    cos_parts,
    expi_parts,
    sin_parts,
    sqrt_parts,
)

# Tolerance
from src.core.math.tolerance import (
    EPS_DOUBLE,
    EPS_SINGLE,
    MAX_ABS_DIFF_DEFAULT,
    MAX_REL_DIFF_DEFAULT,
    approx_equal,
    is_identical,
    machine_epsilon,
)

__all__ = [
    # Arithmetic
    "add_parts",
    "div_parts",
    "mul_parts",
    "rdiv_parts",
    "scale_parts",
    "sub_parts",
    "unscale_parts",
    # Polar
    "argument_parts",
    "from_polar_parts",
    "modulus_parts",
    "pi_of",
    "sq_modulus_parts",
    # Power
    "pow_complex_parts",
    "pow_int_parts",
    "pow_real_parts",
    "rpow_parts",
    # Elementary
    "coshisinh_parts",
    "cos_parts",
    "expi_parts",
    "sin_parts",
    "sqrt_parts",
    # Tolerance: Constants
    "EPS_DOUBLE",
    "EPS_SINGLE",
    "MAX_ABS_DIFF_DEFAULT",
    "MAX_REL_DIFF_DEFAULT",
    # Tolerance: Functions
    "approx_equal",
    "is_identical",
    "machine_epsilon",
]
