# catalog/errors.py


class DataIntegrityError(Exception):
    """A stored record points at a required reference that no longer resolves.

    Only reachable if a row was written around the services, so it is
    treated as fatal for the request and never defaulted.
    """

    def __init__(self, entity: str, entity_id: int, reference: str):
        self.entity = entity
        self.entity_id = entity_id
        self.reference = reference
        super().__init__(f"{entity} {entity_id} has a dangling {reference} reference")


class UnknownEntityKind(ValueError):
    """Raised when a caller asks for an entity kind the catalog does not serve"""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown entity kind: {kind}")
