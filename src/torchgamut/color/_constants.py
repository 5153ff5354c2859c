"""Constants for the sRGB transfer function and the Display P3 gamut matrix."""

# IEC 61966-2-1 transfer function.
SRGB_GAMMA = 2.4
SRGB_ENCODED_THRESHOLD = 0.04045
SRGB_LINEAR_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_ENCODED_OFFSET = 0.055
SRGB_ENCODED_DIVISOR = 1.055

# Linear Display P3 to linear sRGB, row-major. Both spaces share the D65
# white point, so no chromatic adaptation is involved:
#   M = sRGB_XYZ_to_RGB @ P3_RGB_to_XYZ
DISPLAY_P3_LINEAR_TO_SRGB_LINEAR = (
    (1.2249401, -0.2249402, 0.0),
    (-0.0420569, 1.0420571, 0.0),
    (-0.0196376, -0.0786507, 1.0982884),
)
