"""
Presentation layer for Sceau.
"""
