"""
Game Module - game state, input translation, layout and 2D rendering
"""
