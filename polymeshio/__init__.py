"""Read polygonal meshes from CSV cell files and export them as AVS UCD ASCII files."""

__version__ = "1.0.0"
__all__ = ["cli", "mesh", "ucd"]