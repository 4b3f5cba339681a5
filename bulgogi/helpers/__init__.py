"""
Helpers package.
"""
