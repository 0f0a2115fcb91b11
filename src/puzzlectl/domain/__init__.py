"""Domain layer: decimal arithmetic and the puzzle simulators.

This layer depends only on the stdlib.
It must never import from services, config, commands, or output.
"""
