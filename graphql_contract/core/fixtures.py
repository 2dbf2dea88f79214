"""
Per-test fixture provisioning

Destructive scenarios work on records they create themselves instead of the
shared seeded ids. Some backends accept mutations without persisting them;
mutation_target_* detects that and falls back to the seeded id, so the
scenario still runs without depending on another test's side effects.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from graphql_contract.core import documents
from graphql_contract.core.data_factory import DataFactory
from graphql_contract.core.errors import GraphQLRequestError
from graphql_contract.core.graphql_client import GraphQLClient
from graphql_contract.models import User

logger = logging.getLogger(__name__)


@dataclass
class MutationTarget:
    id: str
    provisioned: bool


class FixtureProvisioner:
    """Creates records for a single test and deletes them afterwards"""

    def __init__(self, client: GraphQLClient, factory: DataFactory):
        self.client = client
        self.factory = factory
        self.config = factory.config

    async def create_user(self, **overrides) -> Dict[str, Any]:
        variables = {"input": self.factory.user_input(**overrides)}
        data = await self.client.request(documents.CREATE_USER, variables)
        user = data["createUser"]
        self.factory.track("users", user["id"])
        return user

    async def create_album(self, user_id: Optional[str] = None, **overrides) -> Dict[str, Any]:
        variables = {"input": self.factory.album_input(user_id, **overrides)}
        data = await self.client.request(documents.CREATE_ALBUM, variables)
        album = data["createAlbum"]
        self.factory.track("albums", album["id"])
        return album

    async def is_persisted_user(self, user_id: str) -> bool:
        data = await self.client.request(documents.GET_USER_ID_NAME, {"id": user_id})
        user = data.get("user")
        return user is not None and not User.model_validate(user).is_empty()

    async def is_persisted_album(self, album_id: str) -> bool:
        data = await self.client.request(documents.GET_ALBUM_ID_TITLE, {"id": album_id})
        return data.get("album") is not None

    async def mutation_target_user(self) -> MutationTarget:
        """A user id safe to update or delete in this test"""
        user = await self.create_user()
        if await self.is_persisted_user(user["id"]):
            return MutationTarget(user["id"], provisioned=True)

        logger.info(f"Created user {user['id']} was not persisted; using seeded user {self.config.seeded_user_id}")
        return MutationTarget(self.config.seeded_user_id, provisioned=False)

    async def mutation_target_album(self) -> MutationTarget:
        """An album id safe to update or delete in this test"""
        album = await self.create_album()
        if await self.is_persisted_album(album["id"]):
            return MutationTarget(album["id"], provisioned=True)

        logger.info(f"Created album {album['id']} was not persisted; using seeded album {self.config.seeded_album_id}")
        return MutationTarget(self.config.seeded_album_id, provisioned=False)

    async def cleanup(self) -> int:
        """Delete tracked albums, then users. Returns the number of failed deletions."""
        failures = 0
        tracked = self.factory.tracked()

        for entity_type, mutation in (("albums", documents.DELETE_ALBUM), ("users", documents.DELETE_USER)):
            for id_value in tracked.get(entity_type, []):
                try:
                    await self.client.request(mutation, {"id": id_value})
                except (GraphQLRequestError, httpx.HTTPError) as e:
                    failures += 1
                    logger.warning(f"Cleanup of {entity_type} {id_value} failed: {e}")
                self.factory.forget(entity_type, id_value)

        return failures
