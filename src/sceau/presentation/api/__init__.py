"""
HTTP API for Sceau.
"""
