"""Domain errors raised below the HTTP layer.

Endpoints translate these into HTTPException responses.
"""


class RecordStoreError(Exception):
    """A create/update/delete/list call against the record store failed."""


class RecordNotFoundError(RecordStoreError):
    def __init__(self, entity: str, record_id: str):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class InvalidTransitionError(Exception):
    """A campaign action was applied from a state that does not allow it."""

    def __init__(self, action: str, current: str):
        super().__init__(f"Cannot {action} a campaign that is {current}")
        self.action = action
        self.current = current
