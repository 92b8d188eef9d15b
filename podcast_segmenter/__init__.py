"""Podcast transcript segmentation and export"""

__version__ = "1.0.0"
