"""Camera orientation transform."""

from src.whitted.core.matrix import Matrix, translation
from src.whitted.core.tuples import Tuple


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Matrix:
    """Build the world-to-camera matrix for an eye looking from one point to another.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction; need not be perpendicular to the view.

    Returns:
        A matrix that moves the world so the eye sits at the origin looking
        down -z with +y up.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0],
            [true_up.x, true_up.y, true_up.z, 0],
            [-forward.x, -forward.y, -forward.z, 0],
            [0, 0, 0, 1],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)
