from .exceptions import VecMathParsingError
from .structures import Vec3
import logging
import math  # Python's math module
import numpy
from pydantic import ValidationError
from typing import Final, Sequence


logger = logging.getLogger(__name__)


DEFAULT_COMPARISON_TOLERANCE: Final[float] = 0.0001


class VectorUtils:
    """
    static class grouping the operations on Vec3.
    Every operation returns a new value and leaves its inputs untouched.
    """

    def __init__(self):
        raise RuntimeError(f"{__class__.__name__} is not meant to be instantiated.")

    @staticmethod
    def vec3(
        x: float,
        y: float,
        z: float
    ) -> Vec3:
        return Vec3(x=x, y=y, z=z)

    @staticmethod
    def zero() -> Vec3:
        return Vec3(x=0.0, y=0.0, z=0.0)

    @staticmethod
    def get_x(vector: Vec3) -> float:
        return vector.x

    @staticmethod
    def get_y(vector: Vec3) -> float:
        return vector.y

    @staticmethod
    def get_z(vector: Vec3) -> float:
        return vector.z

    @staticmethod
    def set_x(
        value: float,
        vector: Vec3
    ) -> Vec3:
        return Vec3(x=value, y=vector.y, z=vector.z)

    @staticmethod
    def set_y(
        value: float,
        vector: Vec3
    ) -> Vec3:
        return Vec3(x=vector.x, y=value, z=vector.z)

    @staticmethod
    def set_z(
        value: float,
        vector: Vec3
    ) -> Vec3:
        return Vec3(x=vector.x, y=vector.y, z=value)

    @staticmethod
    def to_tuple(vector: Vec3) -> tuple[float, float, float]:
        return vector.x, vector.y, vector.z

    @staticmethod
    def from_tuple(values: Sequence[float]) -> Vec3:
        if len(values) != 3:
            raise ValueError(f"Expected a sequence of 3 float. Got {str(values)}.")
        return Vec3(x=values[0], y=values[1], z=values[2])

    @staticmethod
    def to_record(vector: Vec3) -> dict[str, float]:
        """
        Labeled form of the vector, keys in x, y, z order.
        """
        return {"x": vector.x, "y": vector.y, "z": vector.z}

    @staticmethod
    def from_record(record: dict) -> Vec3:
        """
        :param record: mapping holding (at least) the keys x, y, z. Other keys are ignored.
        """
        if not isinstance(record, dict):
            raise VecMathParsingError(f"Expected a dict record. Got {type(record).__name__}.")
        try:
            return Vec3(**record)
        except ValidationError as e:
            raise VecMathParsingError(f"Record could not be parsed as a Vec3: {str(e)}") from None

    @staticmethod
    def to_numpy_array(vector: Vec3) -> numpy.ndarray:
        return numpy.asarray([vector.x, vector.y, vector.z], dtype=float)

    @staticmethod
    def from_numpy_array(value_array: numpy.ndarray) -> Vec3:
        """
        Accepts any array holding exactly 3 elements, e.g. of shape (3,), (3, 1) or (1, 3).
        """
        flattened: numpy.ndarray = numpy.asarray(value_array, dtype=float).flatten()
        if flattened.size != 3:
            raise ValueError(f"Expected input array to have 3 elements. Got {flattened.size}.")
        return Vec3(x=float(flattened[0]), y=float(flattened[1]), z=float(flattened[2]))

    @staticmethod
    def add(
        a: Vec3,
        b: Vec3
    ) -> Vec3:
        return Vec3(x=a.x + b.x, y=a.y + b.y, z=a.z + b.z)

    @staticmethod
    def sub(
        a: Vec3,
        b: Vec3
    ) -> Vec3:
        """
        a - b, componentwise
        """
        return Vec3(x=a.x - b.x, y=a.y - b.y, z=a.z - b.z)

    @staticmethod
    def negate(vector: Vec3) -> Vec3:
        return Vec3(x=-vector.x, y=-vector.y, z=-vector.z)

    @staticmethod
    def scale(
        scalar: float,
        vector: Vec3
    ) -> Vec3:
        return Vec3(x=scalar * vector.x, y=scalar * vector.y, z=scalar * vector.z)

    @staticmethod
    def dot(
        a: Vec3,
        b: Vec3
    ) -> float:
        return a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def cross(
        a: Vec3,
        b: Vec3
    ) -> Vec3:
        """
        Right-handed cross product, e.g. cross(I, J) == K.
        """
        return Vec3(
            x=a.y * b.z - a.z * b.y,
            y=a.z * b.x - a.x * b.z,
            z=a.x * b.y - a.y * b.x)

    @staticmethod
    def length_squared(vector: Vec3) -> float:
        return vector.x * vector.x + vector.y * vector.y + vector.z * vector.z

    @staticmethod
    def length(vector: Vec3) -> float:
        """
        Euclidean norm. Does not overflow or underflow for components whose squares would.
        NaN if any component is NaN, even alongside an infinite component.
        """
        if math.isnan(vector.x) or math.isnan(vector.y) or math.isnan(vector.z):
            return math.nan
        return math.hypot(vector.x, vector.y, vector.z)

    @staticmethod
    def normalize(vector: Vec3) -> Vec3:
        """
        Divide each component by the length of the vector.
        A zero-length vector has an infinite reciprocal, so each component of the result is 0 * inf = NaN.
        """
        length: float = VectorUtils.length(vector)
        if length == 0.0:
            # Python floats raise on division by zero, IEEE-754 gives +inf
            logger.debug(f"Normalizing zero-length vector {vector}; all result components are NaN.")
            return VectorUtils.scale(math.inf, vector)
        # dividing directly, 1.0 / length overflows for subnormal lengths
        return Vec3(x=vector.x / length, y=vector.y / length, z=vector.z / length)

    @staticmethod
    def distance_squared(
        a: Vec3,
        b: Vec3
    ) -> float:
        return VectorUtils.length_squared(VectorUtils.sub(a, b))

    @staticmethod
    def distance(
        a: Vec3,
        b: Vec3
    ) -> float:
        """
        Euclidean distance between the points a and b.
        """
        return VectorUtils.length(VectorUtils.sub(a, b))

    @staticmethod
    def direction(
        a: Vec3,
        b: Vec3
    ) -> Vec3:
        """
        Unit vector pointing from b toward a. NaN components when a == b (see normalize).
        """
        return VectorUtils.normalize(VectorUtils.sub(a, b))

    @staticmethod
    def is_close(
        a: Vec3,
        b: Vec3,
        tolerance: float = DEFAULT_COMPARISON_TOLERANCE
    ) -> bool:
        """
        True when every component of a is within tolerance (absolute) of the same component of b.
        NaN or infinite components are never close to anything.
        """
        return \
            abs(a.x - b.x) <= tolerance and \
            abs(a.y - b.y) <= tolerance and \
            abs(a.z - b.z) <= tolerance

    @staticmethod
    def is_zero(vector: Vec3) -> bool:
        return vector.x == 0.0 and vector.y == 0.0 and vector.z == 0.0
