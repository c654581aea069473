# -*- coding: utf-8 -*-

"""
Code tables for algorithms, locations and order types.

Codes are the stable identifiers used on the wire. The algorithm table is append-only: new algorithms receive the next
free code and existing entries are never renumbered.
"""

__all__ = ['ALGORITHMS', 'LOCATIONS', 'ORDER_TYPES',
           'get_algorithm_name', 'get_algorithm_code', 'get_location_name']

from types import MappingProxyType
from typing import Optional

ALGORITHMS = MappingProxyType({
    0: 'scrypt',
    1: 'sha256',
    2: 'scryptnf',
    3: 'x11',
    4: 'x13',
    5: 'keccak',
    6: 'x15',
    7: 'nist5',
    8: 'neoscrypt',
    9: 'lyra2re',
    10: 'whirlpoolx',
    11: 'qubit',
    12: 'quark',
    13: 'axiom',
    14: 'lyra2rev2',
    15: 'scryptjanenf16',
    16: 'blake256r8',
    17: 'blake256r14',
    18: 'blake256r8vnl',
    19: 'hodl',
    20: 'daggerhashimoto',
    21: 'decred',
    22: 'cryptonight',
    23: 'lbry',
    24: 'equihash',
    25: 'pascal',
    26: 'x11gost',
    27: 'sia',
    28: 'blake2s',
    29: 'skunk',
    30: 'cryptonightv7',
})
"""
Algorithm names by code.
"""

LOCATIONS = MappingProxyType({
    0: 'europe',  # NiceHash
    1: 'usa',     # WestHash
})
"""
Exchange locations by code.
"""

ORDER_TYPES = MappingProxyType({
    0: 'standard',
    1: 'fixed',
})
"""
Order types by code. Not sent by any endpoint, kept for reference when reading order listings.
"""

_ALGORITHM_CODES = MappingProxyType({name: code for code, name in ALGORITHMS.items()})


def get_algorithm_name(code: int) -> Optional[str]:
    """
    Get the name of an algorithm from its code.

    Arguments:
        code:  Algorithm code, eg. 3.

    Returns:
        The algorithm name eg. 'x11', or None if the code is unknown.
    """

    return ALGORITHMS.get(code)


def get_algorithm_code(name: str) -> Optional[int]:
    """
    Get the code of an algorithm from its name.

    Matching is exact and case-sensitive against the lowercase names in :data:`ALGORITHMS`.

    Arguments:
        name:  Algorithm name, eg. 'x11'.

    Returns:
        The algorithm code eg. 3, or None if the name is unknown.
    """

    return _ALGORITHM_CODES.get(name)


def get_location_name(code: int) -> Optional[str]:
    """
    Get the name of an exchange location from its code, or None if the code is unknown.
    """

    return LOCATIONS.get(code)
