"""
Lookup-related domain exceptions.
"""


class NotFoundError(Exception):
    """Raised when an operation targets an unknown record."""

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")
