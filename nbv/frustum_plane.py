from enum import Enum, auto

class FrustumPlane(Enum):
    """Identifies the six faces of a camera frustum."""

    NEAR = auto()
    FAR = auto()
    LEFT = auto()
    RIGHT = auto()
    TOP = auto()
    BOTTOM = auto()
