from .utils import round_half_up

SQUARE_FEET_PER_SQUARE_METER = 10.764

def square_meters_to_square_feet(square_meters: float) -> int:
    """Convert an area in m² to whole square feet."""
    return round_half_up(square_meters * SQUARE_FEET_PER_SQUARE_METER)
