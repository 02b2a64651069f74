# ============================================================================
# FILE: app/schemas/base.py
# ============================================================================
from typing import ClassVar, Tuple
from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class PartialUpdate(CamelModel):
    """
    Base for partial-update schemas.
    Fields listed in REQUIRED_COLUMNS may be omitted but not explicitly nulled.
    """
    REQUIRED_COLUMNS: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def check_required_not_null(self):
        for name in self.REQUIRED_COLUMNS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict:
        """Only the fields the client actually sent"""
        return self.model_dump(exclude_unset=True)

class MessageResponse(BaseModel):
    """Plain confirmation body"""
    message: str
