from .configuration import \
    VectorConfiguration
from .exceptions import \
    VecMathConfigurationError, \
    VecMathError, \
    VecMathParsingError
from .structures import \
    I, \
    J, \
    K, \
    Vec3
from .vector_utils import \
    DEFAULT_COMPARISON_TOLERANCE, \
    VectorUtils
