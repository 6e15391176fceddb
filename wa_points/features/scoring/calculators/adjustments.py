"""
Wind and downhill adjustments.

Points added to the result score for conditions that help or hurt a
performance:

    Wind (100m, 200m, 100mH, 110mH, Long Jump, Triple Jump):
        no reading       -> -30
        headwind / calm  -> +6 per m/s
        tailwind <= 2.0  -> 0
        tailwind  > 2.0  -> -6 per m/s, counted from zero

    Net downhill (road running):
        <= 1.0 m/km      -> 0
         > 1.0 m/km      -> -6, then -0.6 per 0.1 m/km over 1.0

Both penalties jump at the threshold (2.1 m/s costs 12.6 points, 2.0 m/s
costs nothing). That is how the scoring rules read.
"""

from typing import Optional


# Wind
POINTS_PER_M_S = 6.0
NWI_PENALTY = -30.0             # No wind information
TAILWIND_THRESHOLD = 2.0        # m/s

# Net downhill
DOWNHILL_THRESHOLD = 1.0        # m/km
DOWNHILL_BASE_PENALTY = 6.0
POINTS_PER_0_1_M_KM = 0.6


def calculate_wind_adjustment(wind_speed: Optional[float]) -> float:
    """
    Wind adjustment in points.

    Args:
        wind_speed: m/s, positive = tailwind, None = no reading

    Returns:
        Points to add (negative = deduction)
    """
    if wind_speed is None:
        return NWI_PENALTY

    if wind_speed <= 0.0:
        return -wind_speed * POINTS_PER_M_S

    if wind_speed <= TAILWIND_THRESHOLD:
        return 0.0

    return -(wind_speed * POINTS_PER_M_S)


def calculate_downhill_adjustment(net_downhill: Optional[float]) -> float:
    """
    Net downhill adjustment in points.

    Args:
        net_downhill: Net elevation drop in m/km, None = unknown

    Returns:
        Points to add (0 or negative)
    """
    if net_downhill is None or net_downhill <= DOWNHILL_THRESHOLD:
        return 0.0

    excess_tenths = (net_downhill - DOWNHILL_THRESHOLD) * 10.0
    return -(DOWNHILL_BASE_PENALTY + excess_tenths * POINTS_PER_0_1_M_KM)
