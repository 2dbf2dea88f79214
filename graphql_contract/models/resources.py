"""
Resource Pydantic models for the remote users/albums schema
Every field is optional: a response only carries the fields a document selected
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GraphQLModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def selected_values(self) -> Dict[str, Any]:
        """Values of the fields present in the response (explicit nulls included)"""
        return {name: getattr(self, name) for name in self.model_fields_set}


class PageMeta(GraphQLModel):
    total_count: Optional[int] = Field(None, alias="totalCount")


class User(GraphQLModel):
    id: Optional[str] = None
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    albums: Optional["AlbumPage"] = None

    def is_empty(self) -> bool:
        """True for the null-field object the API returns for an unknown user"""
        return all(value is None for value in self.selected_values().values())


class Album(GraphQLModel):
    id: Optional[str] = None
    title: Optional[str] = None
    user: Optional[User] = None

    @property
    def owner_id(self) -> Optional[str]:
        return self.user.id if self.user is not None else None


class UserPage(GraphQLModel):
    data: List[User] = Field(default_factory=list)
    meta: Optional[PageMeta] = None


class AlbumPage(GraphQLModel):
    data: List[Album] = Field(default_factory=list)
    meta: Optional[PageMeta] = None

    def ids(self) -> List[Optional[str]]:
        return [album.id for album in self.data]


User.model_rebuild()
