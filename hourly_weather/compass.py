DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def cardinal(degrees):
    """Map a wind bearing in degrees to one of the 8 compass labels.

    Sector edges round up, so 22.5 is NE and 337.5 is N.
    """
    bearing = float(degrees) % 360.0
    return DIRECTIONS[int((bearing + 22.5) // 45.0) % 8]
