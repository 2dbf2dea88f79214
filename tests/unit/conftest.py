"""
Offline fixtures: a fixed configuration and a client bound to a mocked endpoint
"""

import pytest

from graphql_contract.config import ContractTestConfig
from graphql_contract.core.data_factory import DataFactory
from graphql_contract.core.graphql_client import GraphQLClient

API_URL = "https://graphql.test/api"


@pytest.fixture
def unit_config() -> ContractTestConfig:
    return ContractTestConfig(api_url=API_URL, request_timeout=5.0, max_concurrent_requests=2)


@pytest.fixture
async def mocked_client(unit_config):
    async with GraphQLClient(config=unit_config) as client:
        yield client


@pytest.fixture
def seeded_factory(unit_config) -> DataFactory:
    return DataFactory(unit_config, seed=1234)
