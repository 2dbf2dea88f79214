"""
Either-outcome assertions for soft-fail scenarios

A soft-fail scenario accepts a successful response or a GraphQL error. Both
branches still assert; only the GraphQL error itself is tolerated, and it is
logged so the tolerated outcome stays visible in test output.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, List, Optional

from graphql_contract.core.errors import GraphQLRequestError

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """Result of one request: a value or a GraphQL error"""
    value: Any = None
    error: Optional[BaseException] = None
    label: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value


@dataclass
class OutcomeSummary:
    total: int
    succeeded: int
    failed: int

    @property
    def all_succeeded(self) -> bool:
        return self.failed == 0


async def attempt(awaitable: Awaitable[Any], label: str = "") -> Outcome:
    """Await a request and capture a GraphQL error instead of raising it"""
    try:
        return Outcome(value=await awaitable, label=label)
    except GraphQLRequestError as e:
        return Outcome(error=e, label=label)


async def either_outcome(
    awaitable: Awaitable[Any],
    on_success: Callable[[Any], None],
    on_error: Optional[Callable[[GraphQLRequestError], None]] = None,
    label: str = "",
) -> Outcome:
    """Accept success or a GraphQL error; assert on whichever branch happens"""
    outcome = await attempt(awaitable, label)

    if outcome.ok:
        on_success(outcome.value)
        logger.info(f"{label or 'request'}: API accepted the request")
    else:
        if on_error is not None:
            on_error(outcome.error)
        logger.warning(f"{label or 'request'}: API rejected the request: {outcome.error}")

    return outcome


def _error_message(error: BaseException) -> str:
    return getattr(error, "message", None) or str(error)


async def expect_error(awaitable: Awaitable[Any], *substrings: str) -> GraphQLRequestError:
    """Hard-fail: the request must raise and mention every substring"""
    outcome = await attempt(awaitable)

    if outcome.ok:
        raise AssertionError(f"Expected a GraphQL error, got data: {outcome.value!r}")

    message = _error_message(outcome.error)
    for text in substrings:
        assert text in message, f"Expected error containing {text!r}, got {message!r}"

    return outcome.error


async def expect_error_matching(awaitable: Awaitable[Any], pattern: str) -> GraphQLRequestError:
    """Hard-fail: the request must raise with a message matching the regex"""
    outcome = await attempt(awaitable)

    if outcome.ok:
        raise AssertionError(f"Expected a GraphQL error, got data: {outcome.value!r}")

    message = _error_message(outcome.error)
    assert re.search(pattern, message), f"Expected error matching {pattern!r}, got {message!r}"

    return outcome.error


def assert_not_found(error: GraphQLRequestError) -> None:
    """Error-branch check: the server reported a missing record"""
    assert error.is_not_found(), f"Expected a not-found error, got {error.message!r}"


def assert_authentication_failure(error: GraphQLRequestError) -> None:
    assert error.is_authentication_error(), f"Expected an authentication error, got {error.message!r}"


def assert_validation_error(field: str) -> Callable[[GraphQLRequestError], None]:
    """Error-branch check: the rejection names the offending input field"""

    def _check(error: GraphQLRequestError) -> None:
        assert error.is_validation_error(field), \
            f"Expected a validation error about {field!r}, got {error.message!r}"

    return _check


async def settle(awaitables: Iterable[Awaitable[Any]]) -> List[Outcome]:
    """Await everything concurrently and keep every outcome (allSettled)"""
    results = await asyncio.gather(*awaitables, return_exceptions=True)

    outcomes = []
    for index, result in enumerate(results):
        if isinstance(result, GraphQLRequestError):
            outcomes.append(Outcome(error=result, label=str(index)))
        elif isinstance(result, BaseException):
            if isinstance(result, (AssertionError, asyncio.CancelledError)):
                raise result
            outcomes.append(Outcome(error=result, label=str(index)))
        else:
            outcomes.append(Outcome(value=result, label=str(index)))

    return outcomes


def summarize(outcomes: List[Outcome], label: str = "requests") -> OutcomeSummary:
    succeeded = sum(1 for o in outcomes if o.ok)
    summary = OutcomeSummary(total=len(outcomes), succeeded=succeeded, failed=len(outcomes) - succeeded)
    logger.info(f"{label}: {summary.succeeded}/{summary.total} successful")
    return summary
