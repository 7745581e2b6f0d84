"""Domain layer — period values, parsing, and normalisation.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
