"""
Library service: lending rules for a book catalog.

Application package root, laid out with ports & adapters.

Bounded contexts:
    - lending: User registration, book catalog, borrow/return, review notifications.

Layers:
    - domain: Entities, validators, ports (ABCs), errors.
    - application: The Library orchestrator and its DTOs.
    - infrastructure: Adapters (in-memory database, HTTP review client, webhooks).
    - interfaces: Composition root wiring adapters into the orchestrator.
    - shared: Cross-cutting concerns (logging).
"""
