"""Domain layer — rules, outcomes, and the aggregator.

This layer depends only on stdlib and pydantic.
It must never import from config, output, or commands.
"""
