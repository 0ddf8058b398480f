"""
Application layer for the lending bounded context.
"""
