"""Vector and matrix math, shapes, light data, debug lines and scenes for small 3D engines."""

__version__ = "0.1.0"