"""
Response shape validation for the users/albums contract
Not-found shapes differ per field and are checked per field, never unified
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from graphql_contract.models import Album, AlbumPage, User, UserPage

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class ValidationResult:
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def fail(self, message: str):
        self.valid = False
        self.errors.append(message)


def is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


class DataValidator:
    """Validate GraphQL payloads against the documented contract"""

    @staticmethod
    def validate_page(payload: Any, limit: Optional[int] = None, require_meta: bool = False) -> ValidationResult:
        """Paginated collection: `data` list, at most `limit` long, integer totalCount"""
        result = ValidationResult()

        if not isinstance(payload, dict):
            result.fail(f"Page payload must be an object, got {type(payload).__name__}")
            return result

        data = payload.get("data")
        if not isinstance(data, list):
            result.fail(f"Page data must be a list, got {type(data).__name__}")
            return result

        if limit is not None and len(data) > limit:
            result.fail(f"Page holds {len(data)} items, limit was {limit}")

        meta = payload.get("meta")
        if meta is None:
            if require_meta:
                result.fail("Missing meta in paginated response")
        elif not isinstance(meta, dict):
            result.fail(f"meta must be an object, got {meta!r}")
        elif not isinstance(meta.get("totalCount"), int):
            result.fail(f"meta.totalCount must be an integer, got {meta.get('totalCount')!r}")

        return result

    @staticmethod
    def _validate_echo(payload: Dict[str, Any], expected: Dict[str, Any], result: ValidationResult):
        for key, expected_value in expected.items():
            if key not in payload:
                result.warnings.append(f"Field {key} not selected")
                continue
            if payload[key] != expected_value:
                result.fail(f"{key} = {payload[key]!r}, expected {expected_value!r}")

    @classmethod
    def validate_user(cls, payload: Any, expected: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """User with a truthy id and every expected field echoed exactly"""
        result = ValidationResult()

        if not isinstance(payload, dict):
            result.fail(f"User payload must be an object, got {payload!r}")
            return result

        try:
            User.model_validate(payload)
        except ValidationError as e:
            result.fail(f"User payload does not match schema: {e}")
            return result

        if not payload.get("id"):
            result.fail("User id must be non-empty")

        if expected:
            cls._validate_echo(payload, expected, result)

        return result

    @classmethod
    def validate_album(cls, payload: Any, expected: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """Album with a truthy id; `userId` in expected is checked against user.id"""
        result = ValidationResult()

        if not isinstance(payload, dict):
            result.fail(f"Album payload must be an object, got {payload!r}")
            return result

        try:
            album = Album.model_validate(payload)
        except ValidationError as e:
            result.fail(f"Album payload does not match schema: {e}")
            return result

        if not album.id:
            result.fail("Album id must be non-empty")

        if expected:
            expected = dict(expected)
            owner = expected.pop("userId", None)
            cls._validate_echo(payload, expected, result)
            if owner is not None and album.user is not None and album.owner_id != owner:
                result.fail(f"user.id = {album.owner_id!r}, expected {owner!r}")

        return result

    @staticmethod
    def validate_page_items(payload: Dict[str, Any], model) -> ValidationResult:
        result = ValidationResult()
        try:
            model.model_validate(payload)
        except ValidationError as e:
            result.fail(f"Page does not match schema: {e}")
        return result


# Assertion shorthands used directly by scenarios

def assert_valid(result: ValidationResult, context: str = ""):
    prefix = f"{context}: " if context else ""
    assert result.valid, f"{prefix}{'; '.join(result.errors)}"


def assert_page(payload: Any, limit: Optional[int] = None, require_meta: bool = False):
    assert_valid(DataValidator.validate_page(payload, limit, require_meta), "page")


def assert_user_absent(payload: Any):
    """user(id) not-found shape: null, or an object whose every field is null"""
    if payload is None:
        return
    assert isinstance(payload, dict), f"Expected null or object, got {payload!r}"
    assert User.model_validate(payload).is_empty(), f"Expected null-field user, got {payload!r}"


def assert_album_absent(payload: Any):
    """album(id) not-found shape: null"""
    assert payload is None, f"Expected album to be null, got {payload!r}"


def assert_owned_by(album: Dict[str, Any], user_id: str):
    """When the album carries its owner, it must be the given user"""
    owner = album.get("user")
    if owner:
        assert owner.get("id") == user_id, f"Album {album.get('id')} owned by {owner.get('id')!r}, expected {user_id!r}"


def assert_not_owned_by(album: Optional[Dict[str, Any]], user_id: str):
    """createAlbum for a missing user: no album, an album without owner, or another owner"""
    if album is None:
        return
    owner = album.get("user")
    assert not owner or owner.get("id") != user_id, f"Album {album.get('id')} attributed to {user_id!r}: {album!r}"


def assert_albums_consistent(user: Dict[str, Any]):
    """Every nested album has an id and title and points back at the parent user"""
    page = AlbumPage.model_validate(user["albums"])
    for album in page.data:
        assert album.id, "Nested album without id"
        assert album.title, f"Nested album {album.id} without title"
        if album.user is not None:
            assert album.owner_id == user["id"], \
                f"Album {album.id} owned by {album.owner_id!r}, expected {user['id']!r}"


def assert_users_page(payload: Any, limit: Optional[int] = None):
    assert_page(payload, limit)
    assert_valid(DataValidator.validate_page_items(payload, UserPage), "users page")


def assert_albums_page(payload: Any, limit: Optional[int] = None):
    assert_page(payload, limit)
    assert_valid(DataValidator.validate_page_items(payload, AlbumPage), "albums page")
