"""
Application layer for Sceau.
"""
