from typing import Tuple


def coordinates_within(
    result: Tuple[float, float], expected: Tuple[float, float], tolerance: float
) -> bool:
    """Whether both longitude and latitude differ by less than tolerance degrees"""
    return (
        abs(result[0] - expected[0]) < tolerance and
        abs(result[1] - expected[1]) < tolerance
    )
