"""Common base for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules that span entities (a vote touches a user and a
    work) and depend only on repository ports, so the same service runs
    against PostgreSQL or the in-memory store.
    """
