"""Pure resize geometry: target dimensions from source size and request."""

import math

from ....common.schemas import ImageMetadata, ResizePlan


def round_half_up(value: float) -> int:
    """Nearest integer, ties away from zero for positive values.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``).
    """
    return math.floor(value + 0.5)


def _positive_or_none(value: int | None) -> int | None:
    # A dimension that rounds to zero is left for the image library to derive.
    if value is None or value <= 0:
        return None
    return value


def compute_resize_plan(
    metadata: ImageMetadata,
    width: int | None,
    height: int | None,
    maintain_aspect_ratio: bool,
) -> ResizePlan:
    """
    Compute the target dimensions for one image.

    Without ``maintain_aspect_ratio`` the requested dimensions pass through
    unchanged (non-uniform stretch allowed). With it, ``width`` x ``height``
    is a bounding box the image is fitted into, and a single requested
    dimension determines the other from the source aspect ratio.

    Args:
        metadata: Intrinsic dimensions of the source image
        width: Requested width, or None
        height: Requested height, or None
        maintain_aspect_ratio: Preserve the source aspect ratio if True

    Returns:
        ResizePlan; empty when neither dimension is requested
    """
    target_width = width
    target_height = height

    if maintain_aspect_ratio:
        aspect_ratio = metadata.aspect_ratio

        if width and height:
            if width / height > aspect_ratio:
                target_width = round_half_up(height * aspect_ratio)
            else:
                target_height = round_half_up(width / aspect_ratio)
        elif width:
            target_height = round_half_up(width / aspect_ratio)
        elif height:
            target_width = round_half_up(height * aspect_ratio)

    return ResizePlan(
        target_width=_positive_or_none(target_width),
        target_height=_positive_or_none(target_height),
    )


def resolve_dimensions(metadata: ImageMetadata, plan: ResizePlan) -> tuple[int, int] | None:
    """
    Fill an unset plan dimension from the source aspect ratio.

    Returns:
        (width, height) to resize to, or None when the plan is empty
    """
    if plan.is_empty:
        return None

    width, height = plan.target_width, plan.target_height
    if width is None and height is not None:
        width = max(1, round_half_up(height * metadata.aspect_ratio))
    elif height is None and width is not None:
        height = max(1, round_half_up(width / metadata.aspect_ratio))

    return width, height
