"""Domain layer — wire models, errors, and the kinematic solver.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
