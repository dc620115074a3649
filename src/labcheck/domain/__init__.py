"""Domain layer: pure validation and calculation rules.

This layer depends only on stdlib.
It must never import from services, output, commands, or config.
"""
