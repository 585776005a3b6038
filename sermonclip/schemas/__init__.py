"""
Request schemas for SermonClip routes.
"""
