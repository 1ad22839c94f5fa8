"""Linear remapping between numeric intervals."""

from typing import TypeVar, Union

Number = TypeVar("Number", int, float)


def _divide(numerator: Union[int, float], denominator: Union[int, float]) -> Union[int, float]:
    if isinstance(numerator, int) and isinstance(denominator, int):
        # Truncate toward zero like fixed-width integer division
        quotient = abs(numerator) // abs(denominator)
        return quotient if (numerator >= 0) == (denominator > 0) else -quotient
    return numerator / denominator


def lerp(value: Number, source_low: Number, source_high: Number, dest_low: Number, dest_high: Number) -> Number:
    """Map ``value`` linearly from ``[source_low, source_high]`` onto ``[dest_low, dest_high]``.

    Integer arguments give an integer result truncated toward zero; any float
    argument gives a float. A zero-length source interval maps to ``dest_low``.

    Args:
        value: Value to remap
        source_low: Start of the source interval
        source_high: End of the source interval
        dest_low: Start of the destination interval
        dest_high: End of the destination interval

    Returns:
        The remapped value

    Example:
        >>> lerp(120, 0, 600, 0, 100)
        20
    """
    source_span = source_high - source_low
    if source_span == 0:
        return dest_low
    return _divide((value - source_low) * (dest_high - dest_low), source_span) + dest_low
