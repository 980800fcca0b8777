"""Domain layer — the closed set of communication domains.

This layer depends only on the stdlib.
It must never import from services, commands, output, or config.
"""
