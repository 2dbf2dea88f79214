"""
Pytest configuration for the GraphQL contract suite
Markers by location, CI fail-fast, session-wide configuration and timing
"""

import logging
from pathlib import Path

import pytest

from graphql_contract.config import get_config
from graphql_contract.core.performance_monitor import PerformanceMonitor
from graphql_contract.logging_setup import configure_logging

logger = logging.getLogger(__name__)

TESTS_DIR = Path(__file__).parent


# === CI/CD OPTIMIZATIONS ===

def pytest_configure(config):
    """Configure logging and CI fail-fast behaviour"""
    contract_config = get_config()
    configure_logging(contract_config)

    if contract_config.ci:
        config.option.tb = "short"
        config.option.maxfail = contract_config.fail_fast_max_failures

    junit_path = getattr(config.option, "xmlpath", None)
    if junit_path:
        Path(junit_path).parent.mkdir(parents=True, exist_ok=True)


def pytest_collection_modifyitems(config, items):
    """Add markers based on where a test lives and what it exercises"""
    for item in items:
        path = Path(str(item.fspath))

        if TESTS_DIR / "contract" in path.parents:
            item.add_marker(pytest.mark.contract)
            if "integration" in path.name:
                item.add_marker(pytest.mark.integration)
            if "mutation" in path.name:
                item.add_marker(pytest.mark.mutation)
        elif TESTS_DIR / "unit" in path.parents:
            item.add_marker(pytest.mark.unit)


def pytest_runtest_logstart(nodeid, location):
    if get_config().ci:
        logger.info(f"Starting: {nodeid}")


# === SHARED FIXTURES ===

@pytest.fixture(scope="session")
def contract_config():
    """Process-wide immutable configuration"""
    return get_config()


@pytest.fixture(scope="session")
def performance_monitor(contract_config):
    monitor = PerformanceMonitor(contract_config)
    yield monitor
    monitor.log_summary()
