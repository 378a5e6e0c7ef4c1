"""A 2D n-body gravity sandbox with a sun, a moon, a camera-following ghost and a pygame viewer."""

__version__ = "0.1.0"