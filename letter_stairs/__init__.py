"""
letter_stairs
-------------
Side-scrolling alphabet platformer: climb letter blocks and hear each letter.
"""

__version__ = "0.1.0"
