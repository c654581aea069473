# -*- coding: utf-8 -*-

"""
Runtime configuration.

:data:`config` starts as a copy of :data:`nicehash.defaults.CONFIG` and may be updated in place by applications, eg.
``config.update({'app_log_level': 10})``. Modules read it at call time, so updates apply to subsequent requests.
"""

__all__ = ['config', 'reset']

import copy

from nicehash import defaults

config = copy.deepcopy(defaults.CONFIG)
"""
Global configuration.
"""


def reset():
    """
    Restore the global configuration to its defaults.
    """

    config.clear()
    config.update(copy.deepcopy(defaults.CONFIG))
