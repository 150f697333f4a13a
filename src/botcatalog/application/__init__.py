"""
Application layer (use cases and the ports they depend on).

Use cases resolve their ports at call time, so adapters can be swapped per
registry without touching the use-case code.
"""
