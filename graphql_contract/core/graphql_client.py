"""
Lightweight GraphQL-over-HTTP client for contract testing
POSTs a document plus variables, returns `data`, raises on `errors`
"""

import asyncio
import logging
from typing import Any, Awaitable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import httpx

from graphql_contract.config import ContractTestConfig, get_config
from graphql_contract.core.errors import GraphQLRequestError
from graphql_contract.core.outcomes import settle

logger = logging.getLogger(__name__)

# A request is either a bare document or (document, variables)
RequestSpec = Union[str, Tuple[str, Optional[Dict[str, Any]]]]

HEALTH_QUERY = "query Health { __typename }"


class GraphQLClient:
    """Stateless GraphQL request client: no retries, no caching"""

    def __init__(
        self,
        url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        config: Optional[ContractTestConfig] = None,
    ):
        self.config = config or get_config()
        self.url = url or self.config.api_url
        self.timeout = timeout if timeout is not None else self.config.request_timeout
        self.headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if headers:
            self.headers.update(headers)
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GraphQLClient":
        self._client = httpx.AsyncClient(timeout=self.timeout, headers=self.headers)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def with_headers(self, **headers: str) -> "GraphQLClient":
        """New client for the same endpoint with extra headers"""
        merged = {k: v for k, v in self.headers.items() if k not in ("Content-Type", "Accept")}
        merged.update(headers)
        return GraphQLClient(url=self.url, headers=merged, timeout=self.timeout, config=self.config)

    @staticmethod
    def build_payload(
        document: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"query": document}
        if variables is not None:
            payload["variables"] = variables
        if operation_name:
            payload["operationName"] = operation_name
        return payload

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(self.url, json=payload)

        async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers) as client:
            return await client.post(self.url, json=payload)

    async def request(
        self,
        document: str,
        variables: Optional[Dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send a GraphQL document and return its `data` object"""
        payload = self.build_payload(document, variables, operation_name)
        response = await self._post(payload)

        try:
            body = response.json()
        except ValueError:
            raise GraphQLRequestError.from_transport(
                response.status_code, response.text, document=document, variables=variables
            )

        if not isinstance(body, dict) or ("data" not in body and "errors" not in body):
            raise GraphQLRequestError.from_transport(
                response.status_code, response.text, document=document, variables=variables
            )

        errors = body.get("errors")
        if errors:
            error = GraphQLRequestError(
                errors,
                status_code=response.status_code,
                data=body.get("data"),
                document=document,
                variables=variables,
            )
            if self.config.debug:
                logger.error(f"GraphQL error: {error.message} (status {response.status_code})")
            raise error

        data = body.get("data")
        if data is None:
            raise GraphQLRequestError.from_transport(
                response.status_code, response.text, document=document, variables=variables
            )

        return data

    @staticmethod
    def _unpack(spec: RequestSpec) -> Tuple[str, Optional[Dict[str, Any]]]:
        if isinstance(spec, str):
            return spec, None
        document, variables = spec
        return document, variables

    async def request_many(self, requests: Iterable[RequestSpec]) -> List[Dict[str, Any]]:
        """Issue requests in parallel; the first failure propagates"""
        coros = [self.request(*self._unpack(spec)) for spec in requests]
        return list(await asyncio.gather(*coros))

    async def request_settled(self, requests: Sequence[Union[RequestSpec, Awaitable[Any]]]) -> list:
        """Issue requests in parallel and collect every outcome

        Each entry is a document, a (document, variables) pair, or an awaitable.
        Results are Outcome objects in request order.
        """
        semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

        async def _bounded(spec):
            async with semaphore:
                if isinstance(spec, (str, tuple)):
                    return await self.request(*self._unpack(spec))
                return await spec

        return await settle([_bounded(spec) for spec in requests])

    async def health_check(self) -> bool:
        """Verify the endpoint answers a trivial query"""
        try:
            data = await self.request(HEALTH_QUERY)
            return data.get("__typename") is not None
        except (httpx.HTTPError, GraphQLRequestError) as e:
            logger.warning(f"Health check against {self.url} failed: {e}")
            return False
