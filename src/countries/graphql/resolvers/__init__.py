"""Resolver package for the GraphQL schema.

Resolver functions referenced by the root query and mutation types. Each
opens one session from the storage handle carried in the GraphQL context.
"""

# Intentionally empty; functions are defined in sibling modules.
