"""
Empyre - procedural terrain maps for a turn-based strategy game.
"""

__version__ = "0.1.0"
