"""
Model Package
Contains sketch geometry, profile construction and level resolution.
"""
