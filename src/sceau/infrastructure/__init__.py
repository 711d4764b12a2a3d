"""
Infrastructure layer for Sceau.
"""
