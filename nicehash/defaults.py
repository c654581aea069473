# -*- coding: utf-8 -*-

"""
Default configuration values.
"""

__all__ = ['API_BASE_URL', 'USER_AGENT', 'CONFIG']

import aiohttp

import nicehash

API_BASE_URL = 'https://api.nicehash.com/api'

USER_AGENT = 'nicehash-python/{} (aiohttp/{})'.format(nicehash.__version__, aiohttp.__version__)
"""
Value of the user-agent header sent with every request.
"""

HTTP_TIMEOUT_SECS = 30.0
HTTP_HOST_CONN_LIMIT = 10

API_ID_ENV = 'NICEHASH_API_ID'
API_KEY_ENV = 'NICEHASH_API_KEY'

CONFIG = {
    # Base URL of the query-string RPC endpoint.
    'api_base_url': API_BASE_URL,

    # User agent header for all requests.
    'user_agent': USER_AGENT,

    # Total timeout for HTTP requests made by sessions the tool creates.
    'http_timeout_secs': HTTP_TIMEOUT_SECS,

    # Maximum concurrent connections per host for sessions the tool creates.
    'http_host_conn_limit': HTTP_HOST_CONN_LIMIT,

    # Minimum log level for the command line tool.
    'app_log_level': 20,
}
