from pydantic import BaseModel, ConfigDict, Field
from typing import Final


class Vec3(BaseModel):
    """
    A vector (or point) in 3D space, as three floating-point components.
    Instances are frozen. Any triple of floats is valid, including infinities and NaN.
    """
    model_config = ConfigDict(frozen=True)

    x: float = Field()
    y: float = Field()
    z: float = Field()

    def __eq__(self, other) -> bool:
        # componentwise, so NaN components compare unequal like the floats themselves
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))


I: Final[Vec3] = Vec3(x=1.0, y=0.0, z=0.0)
J: Final[Vec3] = Vec3(x=0.0, y=1.0, z=0.0)
K: Final[Vec3] = Vec3(x=0.0, y=0.0, z=1.0)
