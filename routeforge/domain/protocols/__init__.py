"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from routeforge.domain.protocols import LoggerProtocol, TokenServiceProtocol
"""

from routeforge.domain.protocols.logger_protocol import LoggerProtocol
from routeforge.domain.protocols.schema_validator_protocol import SchemaValidator
from routeforge.domain.protocols.token_service_protocol import TokenServiceProtocol

__all__ = [
    "LoggerProtocol",
    "SchemaValidator",
    "TokenServiceProtocol",
]
