"""
Presentation layer: command line interface.
"""
