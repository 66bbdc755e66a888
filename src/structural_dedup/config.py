"""Global configuration: tolerances and id settings."""

# Coordinates are rounded to this many decimals before keys are compared.
# Anything closer than ~1e-6 is treated as floating-point noise.
COORDINATE_DECIMALS = 6

# Absolute tolerance for direct point comparisons
POINT_TOLERANCE = 1e-6

# Number of hex characters in the random part of a generated id
ID_HEX_LENGTH = 8

# Appended to the input file stem when the CLI writes a cleaned model
DEFAULT_OUTPUT_SUFFIX = ".clean.json"

# Rotations and offsets smaller than this are skipped as no-ops
TRANSFORM_TOLERANCE = 1e-6
