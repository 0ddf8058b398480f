"""
Application layer package.

Contains the orchestration that composes domain validators and ports.
This layer depends on domain ports, never on infrastructure.
"""
