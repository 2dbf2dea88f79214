"""
Error handling contract tests
Validation errors, header handling, recovery after errors, large and Unicode payloads
"""

import pytest

from graphql_contract.core import documents
from graphql_contract.core.data_factory import UNICODE_NAME
from graphql_contract.core.outcomes import (
    assert_authentication_failure,
    attempt,
    either_outcome,
    expect_error_matching,
)


class TestVariableValidationErrors:

    async def test_missing_required_variable(self, client, contract_config):
        await expect_error_matching(
            client.request(documents.GET_USER_WITH_UNUSED_REQUIRED_VARIABLE, {"id": contract_config.seeded_user_id}),
            r'Variable "\$required".*(not provided|never used)',
        )


class TestMutationErrors:

    async def test_invalid_input_structure(self, client):
        variables = {"input": {"name": "Test User", "invalidField": "should cause error"}}

        error = await expect_error_matching(
            client.request(documents.CREATE_USER, variables),
            r'Field "invalidField"|Field "username"|Field "email"',
        )
        assert error.is_schema_error()


class TestAuthenticationErrors:

    @pytest.mark.soft_fail
    async def test_invalid_bearer_token(self, client, contract_config):
        """The public endpoint may ignore the header; if it rejects, it must say why"""
        async with client.with_headers(Authorization="Bearer invalid_token") as bad_client:
            def served(data):
                assert data["user"]["id"] == contract_config.seeded_user_id

            await either_outcome(
                bad_client.request(documents.GET_USER_ID_NAME, {"id": contract_config.seeded_user_id}),
                on_success=served,
                on_error=assert_authentication_failure,
                label="request with invalid bearer token",
            )


class TestErrorRecovery:

    async def test_recovers_after_schema_error(self, client, contract_config):
        user_id = contract_config.seeded_user_id

        before = await client.request(documents.GET_USER_ID_NAME, {"id": user_id})
        assert before["user"]["id"] == user_id

        failed = await attempt(client.request(documents.INVALID_ROOT_FIELD), "invalid root field")
        assert failed.failed
        assert failed.error.mentions("invalidField")

        after = await client.request(documents.GET_USER_ID_NAME, {"id": user_id})
        assert after["user"]["id"] == user_id
        assert after["user"]["name"]


class TestLargeResponses:

    async def test_users_with_nested_albums(self, client, performance_monitor):
        data = await performance_monitor.time_operation(
            "users with nested albums",
            client.request(documents.GET_USERS_WITH_ALBUMS),
            category="complex_query",
        )

        assert isinstance(data["users"]["data"], list)


class TestUnicodeHandling:

    async def test_create_user_with_unicode_name(self, client, provisioner, test_data):
        variables = {
            "input": {
                "name": UNICODE_NAME,
                "username": f"unicode_{test_data.user_name}",
                "email": test_data.user_email,
            }
        }

        data = await client.request(documents.CREATE_USER, variables)

        created = data["createUser"]
        assert created is not None
        assert created["name"] == UNICODE_NAME
        provisioner.factory.track("users", created["id"])
