"""
SermonClip: turn sermon quotes into narrated, captioned short videos.
"""

__version__ = "0.1.0"
