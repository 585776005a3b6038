"""
HTTP routes for SermonClip.
"""
