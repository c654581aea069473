# -*- coding: utf-8 -*-

"""
Utility module.
"""

__version__ = "0.1.0"
__license__ = "http://opensource.org/licenses/MIT"
__all__ = ['logging', 'prune_params']

from typing import Any, Dict

from nicehash.utils import logging


def prune_params(params: Dict[str, Any]) -> Dict[str, Any]:
    """
    Drop absent (None) values from a parameter mapping, preserving order.

    Empty strings and zero are kept, as they are meaningful values for query parameters.

    Arguments:
        params:  Mapping of parameter names to values.

    Returns:
        A new dict holding only the present parameters, in their original order.
    """

    return {key: value for key, value in params.items() if value is not None}
