from .build import axis_order, build, sort_by_axis

__all__ = [
    "axis_order",
    "build",
    "sort_by_axis",
]
