"""
Application layer.

Use cases, commands and queries that orchestrate the domain model.
"""
