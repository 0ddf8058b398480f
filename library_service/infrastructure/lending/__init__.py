"""
Infrastructure adapters for the lending bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system: storage, the review backend, webhooks.
"""
