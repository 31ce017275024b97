"""C1 Assist: Capture One session project generator."""

__version__ = "1.0.0"
