"""Scene file parsing, vectors, colours, viewport setup and formatted output for a small ray tracer."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "color",
    "display",
    "elements",
    "format_spec",
    "printf",
    "scene",
    "values",
    "vec3",
]