"""
Shared module package.

Cross-cutting concerns used across bounded contexts (logging).
"""
