"""
Maze Module - grid data model and maze generation
"""
