"""Line-level AI/human authorship attribution that survives CI merges and squashes."""

__version__ = "0.1.0"
