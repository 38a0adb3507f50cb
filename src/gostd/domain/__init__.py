"""Domain layer: version grammar and tag translation rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
