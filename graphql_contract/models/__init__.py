"""
Pydantic models for users, albums, pages and mutation inputs
"""

from graphql_contract.models.inputs import (
    CreateAlbumInput,
    CreateUserInput,
    UpdateAlbumInput,
    UpdateUserInput,
)
from graphql_contract.models.resources import Album, AlbumPage, PageMeta, User, UserPage

__all__ = [
    "Album",
    "AlbumPage",
    "CreateAlbumInput",
    "CreateUserInput",
    "PageMeta",
    "UpdateAlbumInput",
    "UpdateUserInput",
    "User",
    "UserPage",
]
