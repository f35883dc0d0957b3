"""Panel and dock configuration with layer-surface state bookkeeping."""

__version__ = "0.1.0"

__all__ = ["container", "handlers", "panel", "space", "surface", "util", "wrapper"]