"""
Constants declarations for coordtransform

These values belong to the offset model itself and must not be replaced with more
accurate ones (e.g. math.pi or the WGS84 ellipsoid); the formulas only reproduce
published GCJ-02 / BD-09 coordinates with exactly these literals.
"""

# BD-09 polar perturbation factor
X_PI = 3.14159265358979324 * 3000.0 / 180.0

# Pi as used throughout the GCJ-02 offset series
PI = 3.1415926535897932384626

# Krasovsky 1940 ellipsoid
KRASOVSKY_A = 6378245.0  # Semi-major axis (meters)
KRASOVSKY_EE = 0.00669342162296594323  # Eccentricity squared

# Origin of the GCJ-02 offset series (lon, lat)
GCJ02_ORIGIN_LON = 105.0
GCJ02_ORIGIN_LAT = 35.0

# Fixed BD-09 shift applied on top of GCJ-02
BD09_LON_SHIFT = 0.0065
BD09_LAT_SHIFT = 0.006

# Bounding box outside of which no national offset is applied
CHINA_MIN_LON = 72.004
CHINA_MAX_LON = 137.8347
CHINA_MIN_LAT = 0.8293
CHINA_MAX_LAT = 55.8271
