"""Domain layer: error values, context, rule capabilities, value predicates.

This layer depends only on stdlib and pydantic.
It must never import from core, rules, config, or output.
"""
