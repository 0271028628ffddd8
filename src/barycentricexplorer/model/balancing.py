"""
Coordinate Rebalancing
======================
When one barycentric coordinate is edited directly, the other two absorb the
difference so that the three weights keep summing to one.

How the difference is split is chosen by a BalancingMode. Each mode maps to
a pure function registered with `register_strategy`:

    strategy(first, second, deviation) -> (new_first, new_second)
"""
from __future__ import annotations

from enum import StrEnum
from typing import Callable
import logging

from barycentricexplorer.model.geometry_primitives import BarycentricCoordinates
from barycentricexplorer.utils import clamp, is_zero

logger = logging.getLogger(__name__)


class BalancingMode(StrEnum):
    """How the two unedited coordinates share a deviation."""
    EVENLY = "evenly"
    RATIO = "ratio"
    NONE = "none"


Strategy = Callable[[float, float, float], tuple[float, float]]

_REGISTRY: dict[BalancingMode, Strategy] = {}


def register_strategy(mode: BalancingMode) -> Callable[[Strategy], Strategy]:
    """Function decorator to register a distribution strategy for a mode."""
    def decorator(func: Strategy) -> Strategy:
        _REGISTRY[mode] = func
        return func
    return decorator


def get_strategy(mode: BalancingMode | str) -> Strategy:
    func = _REGISTRY.get(BalancingMode(mode))
    if not func:
        raise KeyError(f"No strategy registered for mode '{mode}'")
    return func


def list_modes() -> list[BalancingMode]:
    return list(_REGISTRY.keys())


@register_strategy(BalancingMode.EVENLY)
def distribute_evenly(first: float, second: float, deviation: float) -> tuple[float, float]:
    half = deviation / 2
    return first + half, second + half


@register_strategy(BalancingMode.RATIO)
def distribute_by_ratio(first: float, second: float, deviation: float) -> tuple[float, float]:
    """Split proportionally to the current values."""
    first_zero = is_zero(first)
    second_zero = is_zero(second)
    if first_zero and second_zero:
        return distribute_evenly(first, second, deviation)
    if first_zero:
        return first, second + deviation
    if second_zero:
        return first + deviation, second

    total = first + second
    # equal and opposite: no meaningful ratio
    if is_zero(total):
        return distribute_evenly(first, second, deviation)

    return first + deviation * first / total, second + deviation * second / total


@register_strategy(BalancingMode.NONE)
def keep_unchanged(first: float, second: float, deviation: float) -> tuple[float, float]:
    return first, second


def other_indices(index: int) -> tuple[int, int]:
    """The two component indices different from `index`, ascending."""
    if index not in (0, 1, 2):
        raise ValueError(f"Component index must be 0, 1 or 2, got {index}.")
    first, second = (i for i in range(3) if i != index)
    return first, second


def _restore_range(values: list[float], edited: int) -> None:
    """
    Pull an out-of-range unedited component back into [0, 1] and let the
    remaining one take up the rest, so the sum stays exactly one.
    """
    first, second = other_indices(edited)
    violating = [i for i in (first, second) if not 0.0 <= values[i] <= 1.0]
    if not violating:
        return

    if len(violating) == 2:
        # One is below 0 and the other above 1; clamping the negative one
        # leaves 1 - v_edited for the other, which is inside [0, 1].
        logger.debug(f"Both unedited components out of range: {values}.")
        j = min(violating, key=lambda i: values[i])
    else:
        j = violating[0]

    k = second if j == first else first
    values[j] = clamp(values[j])
    values[k] = 1.0 - values[edited] - values[j]


def rebalance(
    edited_index: int,
    new_value: float,
    current: BarycentricCoordinates,
    mode: BalancingMode | str = BalancingMode.EVENLY,
    keep_inside: bool = True
    ) -> BarycentricCoordinates:
    """
    Apply a direct edit of one coordinate and redistribute the rest.

    Args:
        edited_index: Index (0, 1, 2) of the edited component.
        new_value: The value entered by the user.
        current: Coordinates before the edit.
        mode: Strategy for splitting the deviation over the other two.
        keep_inside: If True, every component ends up in [0, 1].

    Returns:
        The new coordinates, summing to one in every mode. In NONE mode the
        unedited pair stays put and the edit resolves to `1 - v_j - v_k`,
        so on coordinates that already sum to one it changes nothing.
    """
    first, second = other_indices(edited_index)

    if keep_inside:
        new_value = clamp(new_value)

    values = list(current)
    values[edited_index] = float(new_value)
    deviation = 1.0 - sum(values)

    values[first], values[second] = get_strategy(mode)(values[first], values[second], deviation)

    if BalancingMode(mode) is BalancingMode.NONE:
        # The other two are fixed, so they determine the edited component
        values[edited_index] = 1.0 - values[first] - values[second]

    if keep_inside:
        _restore_range(values, edited_index)

    result = BarycentricCoordinates.from_iterable(values)
    logger.debug(f"Rebalanced ({mode}) component {edited_index}: {current} -> {result}")
    return result
