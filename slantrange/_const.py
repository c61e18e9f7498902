"""
Constants declarations for slantrange
"""

# WGS84-derived ellipsoid axes
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.0  # Semi-minor axis (meters)

# First eccentricity, squared
WGS84_E2 = 1 - (WGS84_B ** 2) / (WGS84_A ** 2)
