MM_PER_FOOT = 304.8

def mm_to_feet(millimeters: float) -> float:
    """Convert millimeters to feet."""
    return millimeters / MM_PER_FOOT

def feet_to_mm(feet: float) -> float:
    """Convert feet to millimeters."""
    return feet * MM_PER_FOOT
