"""
Domain layer for Sceau.
"""
