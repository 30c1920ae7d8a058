"""
Moo Who? - a point-and-click game where children identify hidden animals by their sounds.
"""

__version__ = "1.0.0"
