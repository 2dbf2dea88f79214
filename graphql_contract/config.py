"""
Lightweight contract testing configuration
One immutable configuration object per process, built from the environment
"""

import os
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

DEFAULT_API_URL = "https://graphqlzero.almansi.me/api"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return float(value)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


@dataclass(frozen=True)
class ContractTestConfig:
    """API contract testing configuration"""

    # Remote endpoint
    api_url: str = DEFAULT_API_URL
    request_timeout: float = 30.0

    # Logging and CI behaviour
    debug: bool = False
    ci: bool = False
    fail_fast_max_failures: int = 1

    # Concurrency Control
    max_concurrent_requests: int = 5

    # Test data
    test_data_prefix: str = "gqlzero_test"
    seeded_user_id: str = "1"
    seeded_album_id: str = "1"

    # Performance thresholds (seconds)
    perf_threshold_simple_query: float = 2.0
    perf_threshold_complex_query: float = 5.0
    perf_threshold_mutation: float = 3.0

    @classmethod
    def from_env(cls) -> "ContractTestConfig":
        """Build configuration from environment variables"""
        return cls(
            api_url=os.getenv("GRAPHQL_API_URL", DEFAULT_API_URL).strip(),
            request_timeout=_env_float("TEST_TIMEOUT_SECONDS", 30.0),
            debug=_env_bool("DEBUG_TESTS"),
            ci=_env_bool("CI"),
            fail_fast_max_failures=_env_int("FAIL_FAST_MAX_FAILURES", 1),
            max_concurrent_requests=_env_int("MAX_CONCURRENT_REQUESTS", 5),
            test_data_prefix=os.getenv("TEST_DATA_PREFIX", "gqlzero_test"),
            seeded_user_id=os.getenv("SEEDED_USER_ID", "1"),
            seeded_album_id=os.getenv("SEEDED_ALBUM_ID", "1"),
            perf_threshold_simple_query=_env_float("PERF_THRESHOLD_SIMPLE_QUERY", 2.0),
            perf_threshold_complex_query=_env_float("PERF_THRESHOLD_COMPLEX_QUERY", 5.0),
            perf_threshold_mutation=_env_float("PERF_THRESHOLD_MUTATION", 3.0),
        )

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if not self.api_url:
            errors.append("GRAPHQL_API_URL is required")
        else:
            parsed = urlparse(self.api_url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(f"GRAPHQL_API_URL must be an http(s) URL, got {self.api_url!r}")

        if self.request_timeout <= 0:
            errors.append("TEST_TIMEOUT_SECONDS must be positive")

        if self.max_concurrent_requests < 1:
            errors.append("MAX_CONCURRENT_REQUESTS must be at least 1")

        if self.fail_fast_max_failures < 1:
            errors.append("FAIL_FAST_MAX_FAILURES must be at least 1")

        return errors

    def perf_thresholds(self) -> dict:
        return {
            "simple_query": self.perf_threshold_simple_query,
            "complex_query": self.perf_threshold_complex_query,
            "mutation": self.perf_threshold_mutation,
        }


_config: Optional[ContractTestConfig] = None


def get_config() -> ContractTestConfig:
    """Get validated test configuration"""
    global _config

    if _config is None:
        load_dotenv()
        config = ContractTestConfig.from_env()
        errors = config.validate()

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        _config = config

    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment"""
    global _config
    _config = None
