# edumanage/schemas/base.py
"""Shared Pydantic configuration: camelCase on the wire, snake_case in Python."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_update_dict(self) -> dict:
        """Only the fields the client actually sent, keyed by column name"""
        return self.model_dump(exclude_unset=True)

def reject_null(value):
    """Update payloads may omit a required column but not null it"""
    if value is None:
        raise ValueError("may not be null")
    return value
