"""
Infrastructure layer: adapters for the application ports and logging setup.
"""
