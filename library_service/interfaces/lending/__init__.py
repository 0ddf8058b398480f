"""
Interfaces for the lending bounded context.
"""
