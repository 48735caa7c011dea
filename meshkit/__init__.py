"""Building blocks for polygon mesh processing: properties, timing, memory usage, barycentric coordinates, tessellation and textures."""

__version__ = "0.1.0"

__all__ = [
    "barycentric",
    "core",
    "memory_usage",
    "properties",
    "stop_watch",
    "tesselation",
    "textures",
]