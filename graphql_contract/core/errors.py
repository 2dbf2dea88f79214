"""
GraphQL request errors
Every remote failure surfaces as GraphQLRequestError carrying the first error's message
"""

import re
from typing import Any, Dict, List, Optional

UNKNOWN_ERROR_MESSAGE = "Unknown GraphQL error"

_NOT_FOUND_PATTERN = re.compile(r"not\s+found|does not exist", re.IGNORECASE)
_SCHEMA_PATTERN = re.compile(
    r'Cannot query field|Unknown argument|Variable "\$\w+"|Field "\w+"|Syntax Error',
)
_AUTH_PATTERN = re.compile(r"authenticat|unauthori[sz]ed|invalid token", re.IGNORECASE)


class GraphQLRequestError(Exception):
    """Raised when a GraphQL response carries errors or cannot be read"""

    def __init__(
        self,
        errors: List[Dict[str, Any]],
        status_code: Optional[int] = None,
        data: Optional[Dict[str, Any]] = None,
        document: Optional[str] = None,
        variables: Optional[Dict[str, Any]] = None,
    ):
        self.errors = errors
        self.status_code = status_code
        self.data = data
        self.document = document
        self.variables = variables

        first = errors[0] if errors else {}
        self.message = first.get("message") or UNKNOWN_ERROR_MESSAGE
        super().__init__(self.message)

    @classmethod
    def from_transport(cls, status_code: int, body: str, **kwargs) -> "GraphQLRequestError":
        """Error for a response without a usable GraphQL envelope"""
        snippet = body[:200] if body else ""
        message = f"HTTP {status_code}: response is not a GraphQL envelope"
        if snippet:
            message = f"{message} ({snippet})"
        return cls([{"message": message}], status_code=status_code, **kwargs)

    @property
    def messages(self) -> List[str]:
        return [e.get("message") or UNKNOWN_ERROR_MESSAGE for e in self.errors]

    def mentions(self, text: str) -> bool:
        """Case-insensitive substring check across every error message"""
        needle = text.lower()
        return any(needle in m.lower() for m in self.messages)

    # Error taxonomy: validation, not-found, schema, authentication

    def is_validation_error(self, field: str) -> bool:
        return self.mentions(field)

    def is_not_found(self) -> bool:
        return any(_NOT_FOUND_PATTERN.search(m) for m in self.messages)

    def is_schema_error(self) -> bool:
        return any(_SCHEMA_PATTERN.search(m) for m in self.messages)

    def is_authentication_error(self) -> bool:
        return any(_AUTH_PATTERN.search(m) for m in self.messages)

    def __repr__(self) -> str:
        return f"GraphQLRequestError(message={self.message!r}, status_code={self.status_code})"
