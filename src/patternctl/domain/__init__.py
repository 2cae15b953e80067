"""Domain layer: the pattern catalog itself.

This layer depends only on the standard library.
It must never import from services, commands, config, or plugins.
"""
