"""Application environment types.

Defines the runtime environments a routeforge application can run in.
Used by Settings to pick the log renderer and secret policy.

Environments:
- DEVELOPMENT: Local development, human-readable logs, insecure secret allowed
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Production deployment, signing secret must be configured
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
