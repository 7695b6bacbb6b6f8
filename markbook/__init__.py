"""Line-based record storage, typed settings, item buffers and nested commands for a bookmark manager."""

__version__ = "0.1.0"