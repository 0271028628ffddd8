"""Interactive visualization of barycentric coordinates on a triangle."""
__version__ = "0.1.0"
