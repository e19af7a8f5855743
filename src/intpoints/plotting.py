from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Sequence

from intpoints.config import DEFAULT_POINT_STYLE, REFERENCE_SQUARE_STYLE
from intpoints.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from intpoints.points import PointSet


def draw_point_set(
    point_set: PointSet,
    offset: Sequence[float] = (0.0, 0.0),
    ax: Optional[Axes] = None,
    **style: Any,
) -> Axes:
    """
    Draw a 2D point set on top of the reference square [-1, +1]^2.

    Args:
        point_set: The point set; must be two-dimensional.
        offset: Shift (dx, dy) applied to the square and the points, e.g. to
            draw several rules side by side.
        ax: Axes to draw into; a new figure is created if omitted.
        **style: Matplotlib line properties overriding the default point style.

    Raises:
        InvalidConfigurationError: If the point set is not two-dimensional.

    Returns:
        The axes that were drawn into.
    """
    import matplotlib.pyplot as plt
    from matplotlib.patches import Polygon

    if point_set.ndim != 2:
        raise InvalidConfigurationError(
            f"Only 2D point sets can be drawn; '{point_set.rule}' has ndim={point_set.ndim}."
        )

    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))

    dx, dy = offset
    square = Polygon(
        [[dx - 1, dy - 1], [dx + 1, dy - 1], [dx + 1, dy + 1], [dx - 1, dy + 1]],
        **REFERENCE_SQUARE_STYLE,
    )
    ax.add_patch(square)

    coords = point_set.coordinates
    ax.plot(coords[:, 0] + dx, coords[:, 1] + dy, **{**DEFAULT_POINT_STYLE, **style})
    ax.set_aspect("equal")
    ax.autoscale_view()
    return ax
