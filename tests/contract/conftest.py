"""
Fixtures for the live contract suite
Every test gets its own client, unique test data and a provisioner that
deletes what the test created
"""

import logging

import pytest
import pytest_asyncio

from graphql_contract.core.data_factory import DataFactory
from graphql_contract.core.fixtures import FixtureProvisioner
from graphql_contract.core.graphql_client import GraphQLClient

logger = logging.getLogger(__name__)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def api_available(contract_config) -> bool:
    """Verify the remote endpoint once per session"""
    client = GraphQLClient(config=contract_config, timeout=10.0)
    available = await client.health_check()
    if available:
        logger.info(f"GraphQL endpoint reachable: {contract_config.api_url}")
    return available


@pytest.fixture(autouse=True)
def require_api(api_available, contract_config):
    if not api_available:
        pytest.skip(f"GraphQL endpoint not reachable: {contract_config.api_url}")


@pytest.fixture
async def client(contract_config):
    async with GraphQLClient(config=contract_config) as graphql_client:
        yield graphql_client


@pytest.fixture
def factory(contract_config) -> DataFactory:
    return DataFactory(contract_config)


@pytest.fixture
def test_data(factory):
    """Unique names, emails and titles for this test"""
    return factory.generate_unique_test_data()


@pytest.fixture
async def provisioner(client, factory):
    provisioner = FixtureProvisioner(client, factory)
    yield provisioner
    failures = await provisioner.cleanup()
    if failures:
        logger.warning(f"{failures} fixture records could not be cleaned up")
