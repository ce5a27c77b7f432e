"""Rigid 6-DoF transforms built on scipy rotations."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from scipy.spatial.transform import Rotation


class Transformation:
    """Rotation plus translation mapping points from a child to a parent frame.

    ``T_A_B * p_B`` expresses a point given in frame ``B`` in frame ``A``;
    ``T_A_B * T_B_C`` composes to ``T_A_C``.
    """

    def __init__(
        self,
        translation: Optional[Sequence[float]] = None,
        rotation: Optional[Rotation] = None,
    ) -> None:
        """Create a transform.

        Args:
            translation: Length 3 translation, zero if omitted.
            rotation: ``scipy.spatial.transform.Rotation``, identity if omitted.
        """
        if translation is None:
            translation = np.zeros(3)
        translation = np.array(translation, dtype=float)
        if translation.shape != (3,):
            raise ValueError("Translation vector must be of length 3.")
        self.translation: np.ndarray = translation
        self.rotation: Rotation = rotation if rotation is not None else Rotation.identity()

    @classmethod
    def identity(cls) -> "Transformation":
        return cls()

    @classmethod
    def from_quaternion(cls, translation, quaternion) -> "Transformation":
        """Build from a translation and an ``(x, y, z, w)`` quaternion.

        The quaternion is normalised before use.
        """
        quaternion = np.array(quaternion, dtype=float)
        if quaternion.shape != (4,):
            raise ValueError("Rotation quaternion must be of length 4.")
        quaternion /= np.linalg.norm(quaternion)
        return cls(translation, Rotation.from_quat(quaternion))

    @classmethod
    def from_euler(
        cls, translation, angles, seq: str = "xyz", degrees: bool = True
    ) -> "Transformation":
        return cls(translation, Rotation.from_euler(seq, angles, degrees=degrees))

    @classmethod
    def from_matrix(cls, matrix) -> "Transformation":
        """Build from a 4x4 homogeneous matrix.

        Raises:
            ValueError: If ``matrix`` is not 4x4.
        """
        matrix = np.asarray(matrix, dtype=float)
        if matrix.shape != (4, 4):
            raise ValueError("Input matrix must be a 4x4 numpy array")
        return cls(matrix[:3, 3], Rotation.from_matrix(matrix[:3, :3]))

    def as_matrix(self) -> np.ndarray:
        """Return the 4x4 homogeneous matrix."""
        matrix = np.eye(4)
        matrix[:3, :3] = self.rotation.as_matrix()
        matrix[:3, 3] = self.translation
        return matrix

    def inverse(self) -> "Transformation":
        inverse_rotation = self.rotation.inv()
        return Transformation(-inverse_rotation.apply(self.translation), inverse_rotation)

    def apply(self, points) -> np.ndarray:
        """Transform a single 3-vector or an ``(N, 3)`` array of points."""
        points = np.asarray(points, dtype=float)
        return self.rotation.apply(points) + self.translation

    def __mul__(self, other):
        if isinstance(other, Transformation):
            return Transformation(
                self.rotation.apply(other.translation) + self.translation,
                self.rotation * other.rotation,
            )
        return self.apply(other)

    def __repr__(self) -> str:
        return (
            f"Transformation(translation={self.translation.tolist()}, "
            f"quaternion={self.rotation.as_quat().tolist()})"
        )
