"""
Lending bounded context, domain layer.

- Book and user entities
- Identifier and name validation
- Database, review and notification ports
"""
