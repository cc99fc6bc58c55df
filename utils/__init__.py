"""
Shared constants and color palette
"""
