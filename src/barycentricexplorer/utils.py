ZERO_TOLERANCE = 1e-12


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    """Limit value to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))

def is_zero(value: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    return abs(value) <= tolerance
