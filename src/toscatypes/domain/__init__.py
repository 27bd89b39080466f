"""Domain layer — value types, unit vocabulary, parsing and evaluation.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
