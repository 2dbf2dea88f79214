"""
Mutation input models
Dump with to_variables() to get the wire shape (camelCase, unset fields dropped)
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class MutationInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_variables(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CreateUserInput(MutationInput):
    name: str
    username: str
    email: str
    phone: Optional[str] = None
    website: Optional[str] = None


class UpdateUserInput(MutationInput):
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class CreateAlbumInput(MutationInput):
    title: str
    user_id: str = Field(alias="userId")


class UpdateAlbumInput(MutationInput):
    title: Optional[str] = None
    user_id: Optional[str] = Field(None, alias="userId")
