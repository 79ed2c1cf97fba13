# domain/geometry/constants.py
"""Constants for geometric comparisons."""

# Absolute tolerance used by the fixed-epsilon strategy
FIXED_EPSILON = 1e-12

# Relative tolerance used by the dynamic-epsilon strategy
DYNAMIC_EPSILON = 1e-12

# Kind label of objects that are scale-aligned before comparison
PLANE_KIND = "plane"
