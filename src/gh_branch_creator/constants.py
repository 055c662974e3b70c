"""Global constants for gh-branch-creator.

Defaults for configuration and the exit codes the command line reports.
Override the defaults through environment variables rather than editing
this module.
"""

import os

# GitHub API
DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
HTTP_TIMEOUT_S = float(os.environ.get("HTTP_TIMEOUT_S", 10.0))

# Strategies
STRATEGY_AUTO = "auto"
STRATEGY_GH = "gh"
STRATEGY_HTTP = "http"
STRATEGIES = (STRATEGY_AUTO, STRATEGY_GH, STRATEGY_HTTP)

# Process exit codes
EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_TOOLING = 3
EXIT_BASE_NOT_FOUND = 4
EXIT_CREATE_FAILED = 5

# Diagnostics
MAX_BODY_SNIPPET = 200
SHORT_SHA_LEN = 8

# Logging
DEFAULT_LOG_LEVEL = "WARNING"
