# -*- coding: utf-8 -*-

"""
NiceHash API module.
"""

__version__ = "1.0.0"
__all__ = ['Client', 'API_METHODS']

import asyncio
import urllib.parse

from typing import Any, Dict, Optional

import aiohttp
import yarl

from nicehash import utils
from nicehash import registry
from nicehash import configuration

config = configuration.config
"""
Global configuration.
"""

AUTH_PARAMS = ('id', 'key')
"""
Names of the credential parameters, in the order they are sent.
"""

API_METHODS = {
    'get_global_current_stats': {
        'method': 'stats.global.current',
        'auth': False
    },
    'get_global_24h_stats': {
        'method': 'stats.global.24h',
        'auth': False
    },
    'get_provider_stats': {
        'method': 'stats.global.24h',
        'auth': False
    },
    'get_detailed_provider_stats': {
        'method': 'stats.provider.ex',
        'auth': False
    },
    'get_provider_workers_stats': {
        'method': 'stats.provider.workers',
        'auth': False
    },
    'get_all_provider_workers_stats': {
        'method': 'stats.provider.workers',
        'auth': False
    },
    'get_orders': {
        'method': 'orders.get',
        'auth': False
    },
    'get_multi_algorithm_mining_info': {
        'method': 'multialgo.info',
        'auth': False
    },
    'get_simple_multi_algorithm_mining_info': {
        'method': 'simplemultialgo.info',
        'auth': False
    },
    'get_needed_buying_info': {
        'method': 'buy.info',
        'auth': False
    },
    'get_my_orders': {
        'method': 'orders.get',
        'auth': True
    },
    'create_order': {
        'method': 'orders.create',
        'auth': True
    },
    'refill_order': {
        'method': 'orders.refill',
        'auth': True
    },
    'remove_order': {
        'method': 'orders.remove',
        'auth': True
    },
    'set_order_price': {
        'method': 'orders.set.price',
        'auth': True
    },
    'decrease_order_price': {
        'method': 'orders.set.price.decrease',
        'auth': True
    },
    'set_order_limit': {
        'method': 'orders.set.limit',
        'auth': True
    },
    'get_my_balance': {
        'method': 'balance',
        'auth': True
    },
}
"""
Client method names mapped to their remote method name and whether credentials are sent.
"""


class Client:
    """
    Client for interacting with the NiceHash API.

    Every endpoint method issues a single GET request and returns the parsed JSON response body unmodified. Errors
    from the transport (connection failures, non-2xx statuses, invalid JSON) propagate to the caller.

    Arguments:
        session:  HTTP client session used for all requests. Timeouts and connection limits are the session's
                  responsibility.
        api_id:   API ID, required for private endpoints.
        api_key:  API key, required for private endpoints. Read-only keys are rejected for order management.
        log:      Parent logger (default does no logging).
    """

    def __init__(self, session: aiohttp.ClientSession, api_id: str=None, api_key: str=None,
                 log=utils.logging.DummyLogger()):

        self.session = session
        """
        Object HTTP client session.
        """

        self.api_id = api_id
        """
        API ID sent as the 'id' parameter of private calls, or None if not configured.
        """

        self.api_key = api_key
        """
        API key sent as the 'key' parameter of private calls, or None if not configured.
        """

        self.log = utils.logging.ChildLogger(parent=log, scope=self)
        """
        Object logger.
        """

    def has_credentials(self) -> bool:
        """
        Check whether both the API ID and key are set.

        Credentials are not otherwise validated; private calls without them are sent anyway and rejected by the server.
        """

        return bool(self.api_id) and bool(self.api_key)

    def _get_auth_params(self) -> Dict[str, Any]:
        """
        Get the credential parameters for private calls.
        """

        return {'id': self.api_id, 'key': self.api_key}

    def _get_request_data(self, method: str, params: Dict[str, Any]=None):
        """
        Get the request URL and headers for a given API method and parameters.

        The query string holds the remote method name first, then the present (non-None) parameters in the given
        order, then for private methods the credentials. A 'method' in the passed parameters is ignored, and any
        'id' or 'key' is replaced for private methods.

        Arguments:
            method:  Name of the API method, a key of :data:`API_METHODS`.
            params:  Mapping of query parameter names to values.

        Returns:
            (tuple):  A tuple containing:
                (yarl.URL):  Full URL for the request, already percent-encoded.
                (dict):      Dictionary of headers for the request.

        Raises:
            KeyError:  If the method name is unknown.
        """

        query = {'method': API_METHODS[method]['method']}
        query.update({name: value for name, value in (params or {}).items() if name != 'method'})

        if API_METHODS[method]['auth']:
            for name in AUTH_PARAMS:
                query.pop(name, None)
            query.update(self._get_auth_params())

        url = Client._get_url(utils.prune_params(query))
        headers = {'user-agent': config['user_agent']}

        return (url, headers)

    @staticmethod
    def _get_url(query: Dict[str, Any]=None) -> yarl.URL:
        """
        Form the full request URL for an ordered mapping of query parameters.

        Values are percent-encoded with :func:`urllib.parse.quote` and no safe characters, so reserved characters
        such as '/' and '@' in pool credentials survive the round trip and spaces are sent as '%20'.
        """

        if not query:
            return yarl.URL(config['api_base_url'])

        query_string = urllib.parse.urlencode(query, safe='', quote_via=urllib.parse.quote)
        return yarl.URL('{}?{}'.format(config['api_base_url'], query_string), encoded=True)

    @staticmethod
    async def _request(session: aiohttp.ClientSession, url: yarl.URL, headers: Dict[str, str]):
        """
        Issue a GET request and parse the JSON response body.

        Raises:
            aiohttp.ClientResponseError:  On a non-2xx response status.
            aiohttp.ClientError:          On a connection or transport failure.
            ValueError:                   If the response body is not valid JSON.
        """

        async with session.get(url, headers=headers) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    async def call(self, method: str, params: Dict[str, Any]=None):
        """
        Call a NiceHash API method.

        Arguments:
            method:  Name of the API method to call, a key of :data:`API_METHODS`.
            params:  Mapping of query parameter names to values. None values are omitted.

        Returns:
            The parsed JSON response body.
        """

        url, headers = self._get_request_data(method, params)
        log_params = {name: value for name, value in utils.prune_params(params or {}).items()
                      if name not in AUTH_PARAMS}
        self.log.debug("Calling '{}' ({}) with params {}.", method, API_METHODS[method]['method'], log_params)

        try:
            return await Client._request(self.session, url, headers)

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            self.log.error("Failed on API method '{}': {}: {}", method, type(e).__name__, e)
            raise

    @staticmethod
    async def get_api_version(session: aiohttp.ClientSession):
        """
        Get the API version.

        Requests the bare base URL without a method parameter. The response holds the version under
        ['result']['api_version'].

        Arguments:
            session:  HTTP client session to use for the request.
        """

        return await Client._request(session, Client._get_url(), {'user-agent': config['user_agent']})

    @staticmethod
    def get_algorithm_name(code: int) -> Optional[str]:
        """
        Get the name of an algorithm from its code, see :func:`registry.get_algorithm_name`.
        """

        return registry.get_algorithm_name(code)

    @staticmethod
    def get_algorithm_code(name: str) -> Optional[int]:
        """
        Get the code of an algorithm from its name, see :func:`registry.get_algorithm_code`.
        """

        return registry.get_algorithm_code(name)

    # Public endpoints

    async def get_global_current_stats(self, location: int=None):
        """
        Get current profitability (price) and hashing speed for all algorithms.

        Arguments:
            location:  Location code, see :data:`registry.LOCATIONS`. Both locations if None.
        """

        return await self.call('get_global_current_stats', {'location': location})

    async def get_global_24h_stats(self):
        """
        Get average profitability (price) and hashing speed for all algorithms in the past 24 hours.
        """

        return await self.call('get_global_24h_stats')

    async def get_provider_stats(self, addr: str):
        """
        Get current stats for a provider for all algorithms.

        Arguments:
            addr:  Provider's BTC address.
        """

        return await self.call('get_provider_stats', {'addr': addr})

    async def get_detailed_provider_stats(self, addr: str, from_time: str=None):
        """
        Get detailed stats for a provider for all algorithms, including history data and the past 56 payments.

        Arguments:
            addr:       Provider's BTC address.
            from_time:  Get history from this time (Unix timestamp). Defaults to '0' for the full history.
        """

        if not from_time:
            from_time = '0'

        return await self.call('get_detailed_provider_stats', {'addr': addr, 'from': from_time})

    async def get_provider_workers_stats(self, addr: str, algo: int):
        """
        Get detailed stats for a provider's workers (rigs) for one algorithm.

        Arguments:
            addr:  Provider's BTC address.
            algo:  Algorithm code, see :data:`registry.ALGORITHMS`.
        """

        return await self.call('get_provider_workers_stats', {'addr': addr, 'algo': algo})

    async def get_all_provider_workers_stats(self, addr: str):
        """
        Get detailed stats for a provider's workers (rigs) for all algorithms.
        """

        return await self.call('get_all_provider_workers_stats', {'addr': addr})

    async def get_orders(self, location: int, algo: int):
        """
        Get all orders for an algorithm and location. Refreshed every 30 seconds.

        Arguments:
            location:  Location code, see :data:`registry.LOCATIONS`.
            algo:      Algorithm code, see :data:`registry.ALGORITHMS`.
        """

        return await self.call('get_orders', {'location': location, 'algo': algo})

    async def get_multi_algorithm_mining_info(self):
        """
        Get information about Multi-Algorithm Mining.
        """

        return await self.call('get_multi_algorithm_mining_info')

    async def get_simple_multi_algorithm_mining_info(self):
        """
        Get information about Simple Multi-Algorithm Mining.
        """

        return await self.call('get_simple_multi_algorithm_mining_info')

    async def get_needed_buying_info(self):
        """
        Get the information needed for buying hashing power: per-algorithm down time, fees and minimum amounts.
        """

        return await self.call('get_needed_buying_info')

    # Private endpoints

    async def get_my_orders(self, location: int, algo: int):
        """
        Get all orders owned by the customer for an algorithm and location. Refreshed every 30 seconds.

        Arguments:
            location:  Location code, see :data:`registry.LOCATIONS`.
            algo:      Algorithm code, see :data:`registry.ALGORITHMS`.
        """

        return await self.call('get_my_orders', {'location': location, 'algo': algo, 'my': ''})

    async def create_order(self, location: int, algo: int, amount: float, price: float, limit: float,
                           pool_host: str, pool_port: int, pool_user: str, pool_pass: str, code: str=None):
        """
        Create a new order.

        Arguments:
            location:   Location code, see :data:`registry.LOCATIONS`.
            algo:       Algorithm code, see :data:`registry.ALGORITHMS`.
            amount:     Amount in BTC.
            price:      Price in BTC/GH/day or BTC/TH/day.
            limit:      Speed limit in GH/s or TH/s (0 for no limit).
            pool_host:  Pool hostname or IP.
            pool_port:  Pool port.
            pool_user:  Pool username.
            pool_pass:  Pool password.
            code:       Two-factor authentication code, if enabled on the account.
        """

        return await self.call('create_order', {
            'location': location,
            'algo': algo,
            'amount': amount,
            'price': price,
            'limit': limit,
            'code': code,
            'pool_host': pool_host,
            'pool_port': pool_port,
            'pool_user': pool_user,
            'pool_pass': pool_pass,
        })

    async def refill_order(self, location: int, algo: int, order: int, amount: float):
        """
        Refill an order with additional BTC.

        Arguments:
            location:  Location code.
            algo:      Algorithm code.
            order:     Order ID.
            amount:    Amount in BTC to add.
        """

        return await self.call('refill_order', {'location': location, 'algo': algo, 'order': order, 'amount': amount})

    async def remove_order(self, location: int, algo: int, order: int):
        """
        Remove an order.
        """

        return await self.call('remove_order', {'location': location, 'algo': algo, 'order': order})

    async def set_order_price(self, location: int, algo: int, order: int, price: float):
        """
        Set a new price for an order. The price may only be increased.

        Arguments:
            location:  Location code.
            algo:      Algorithm code.
            order:     Order ID.
            price:     New price in BTC/GH/day or BTC/TH/day.
        """

        return await self.call('set_order_price', {'location': location, 'algo': algo, 'order': order,
                                                   'price': price})

    async def decrease_order_price(self, location: int, algo: int, order: int):
        """
        Decrease the price of an order by the algorithm's down step.
        """

        return await self.call('decrease_order_price', {'location': location, 'algo': algo, 'order': order})

    async def set_order_limit(self, location: int, algo: int, order: int, limit: float):
        """
        Set a new speed limit for an order.

        Arguments:
            location:  Location code.
            algo:      Algorithm code.
            order:     Order ID.
            limit:     New speed limit in GH/s or TH/s (0 for no limit).
        """

        return await self.call('set_order_limit', {'location': location, 'algo': algo, 'order': order,
                                                   'limit': limit})

    async def get_my_balance(self):
        """
        Get the current confirmed and pending balance of the account.
        """

        return await self.call('get_my_balance')
