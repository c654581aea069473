# -*- coding: utf-8 -*-

"""
Client for the NiceHash hashpower exchange API.

Example::

    async with aiohttp.ClientSession() as session:
        client = nicehash.Client(session, api_id='12345', api_key='...')
        stats = await client.get_global_current_stats()
        orders = await client.get_my_orders(1, nicehash.get_algorithm_code('x11'))
"""

__version__ = "1.0.0"
__license__ = "http://opensource.org/licenses/MIT"
__all__ = ['Client', 'ALGORITHMS', 'LOCATIONS', 'ORDER_TYPES',
           'get_algorithm_name', 'get_algorithm_code', 'get_location_name']

from nicehash.registry import ALGORITHMS, LOCATIONS, ORDER_TYPES
from nicehash.registry import get_algorithm_name, get_algorithm_code, get_location_name
from nicehash.client import Client
