"""A small software 3D renderer: OBJ loading, camera, clipping, shading and scanline filling."""

__version__ = "0.1.0"