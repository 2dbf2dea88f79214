"""
Logging configuration for the contract suite
GraphQL error noise is suppressed unless DEBUG_TESTS is enabled
"""

import logging
from typing import Optional

from graphql_contract.config import ContractTestConfig, get_config

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class GraphQLNoiseFilter(logging.Filter):
    """Drop ERROR records about GraphQL errors unless debug mode is on"""

    def __init__(self, debug: bool = False):
        super().__init__()
        self.debug = debug

    def filter(self, record: logging.LogRecord) -> bool:
        if self.debug or record.levelno < logging.ERROR:
            return True
        return "GraphQL" not in record.getMessage()


def configure_logging(config: Optional[ContractTestConfig] = None) -> GraphQLNoiseFilter:
    """Configure root logging once and attach the GraphQL noise filter"""
    config = config or get_config()
    level = logging.DEBUG if config.debug else logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)

    root = logging.getLogger()
    for existing in list(root.filters):
        if isinstance(existing, GraphQLNoiseFilter):
            root.removeFilter(existing)

    noise_filter = GraphQLNoiseFilter(debug=config.debug)
    root.addFilter(noise_filter)
    for handler in root.handlers:
        for existing in list(handler.filters):
            if isinstance(existing, GraphQLNoiseFilter):
                handler.removeFilter(existing)
        handler.addFilter(noise_filter)

    return noise_filter
