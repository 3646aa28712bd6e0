"""Skyline rectangle packing, virtual-key mapping and mouse message decoding."""

__version__ = "0.1.0"
__all__ = ["keys", "mouse", "rectpack"]