"""
clickstories - compile click-through data stories into Quarto reveal.js decks.
"""

__version__ = "0.3.0"
