"""Great-circle distance and stop proximity checks."""

import math

EARTH_RADIUS_KM = 6371.0

# Rider is considered "at" a stop within this radius
ORIGIN_RADIUS_KM = 0.5
# Stops from different routes closer than this are the same physical stop
TRANSFER_RADIUS_KM = 0.1


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in kilometers between two lat/lon points."""
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    a = (math.sin(dlat / 2) ** 2 +
         math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) *
         math.sin(dlon / 2) ** 2)
    return EARTH_RADIUS_KM * 2 * math.asin(math.sqrt(min(1.0, a)))


def is_near(lat: float, lng: float, stop, threshold_km: float = ORIGIN_RADIUS_KM) -> bool:
    """True if (lat, lng) lies strictly within threshold_km of stop."""
    return distance_km(lat, lng, stop.lat, stop.lng) < threshold_km
