# curvekit global settings
import math

# Number of curves generated by a pipeline run
DEFAULT_CURVE_COUNT = 20

# Uniform range for random curve parameters (shape parameters are folded to >= 0)
PARAM_LOW = -10.0
PARAM_HIGH = 10.0

# Parameter at which every curve is evaluated for the report
EVAL_PARAMETER = math.pi / 4

# None draws a fresh seed from OS entropy
DEFAULT_SEED = None

# Report / logging
DEFAULT_PRECISION = 6
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
