"""
Test package. Fixtures live in conftest.py.
"""
