"""
FrameFlow Media Host

Serves local video, audio and image files to the FrameFlow editor's
playback surface over a range-aware custom resource protocol.
"""

__version__ = "1.0.0"
__author__ = "FrameFlow Team"

__all__ = ["__version__"]
