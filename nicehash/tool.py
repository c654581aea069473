#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tool for calling NiceHash API methods from the command line.
"""

__all__ = ['execute', 'main']

import os
import sys
import json
import asyncio
import inspect
import argparse

from typing import Any, Dict, Sequence

import aiohttp

import nicehash

from nicehash import utils
from nicehash import client
from nicehash import defaults
from nicehash import registry
from nicehash.configuration import config


def execute(argv: Sequence[str]=None) -> int:
    """
    Execute this script.

    Arguments:
        argv:  Command line arguments, excluding the program name (default sys.argv[1:]).

    Returns:
        The process exit status.
    """

    method_help = "Client method to call, eg. 'get_orders'. Use --list to see all methods."
    params_help = "Positional arguments for the method, in order."
    id_help = "API ID for private methods (default ${}).".format(defaults.API_ID_ENV)
    key_help = "API key for private methods (default ${}).".format(defaults.API_KEY_ENV)
    list_help = "List available client methods."
    algorithms_help = "Dump the algorithm code table as JSON."
    api_version_help = "Get the API version."
    debug_help = "Enable debug logging."

    arg_parser = argparse.ArgumentParser(prog='nhtool', description=__doc__)
    arg_parser.add_argument('method', type=str, nargs='?', metavar='METHOD', help=method_help)
    arg_parser.add_argument('params', type=str, nargs='*', metavar='PARAM', help=params_help)
    arg_parser.add_argument('--id', type=str, default=os.environ.get(defaults.API_ID_ENV), help=id_help)
    arg_parser.add_argument('--key', type=str, default=os.environ.get(defaults.API_KEY_ENV), help=key_help)
    arg_parser.add_argument('-l', '--list', action='store_true', help=list_help)
    arg_parser.add_argument('-a', '--algorithms', action='store_true', help=algorithms_help)
    arg_parser.add_argument('--api-version', action='store_true', help=api_version_help)
    arg_parser.add_argument('-d', '--debug', action='store_true', help=debug_help)
    args = arg_parser.parse_args(argv)

    if args.debug:
        config['app_log_level'] = utils.logging.DEBUG

    log = utils.logging.StreamLogger(scope='nhtool', level=config['app_log_level'])

    if args.list:
        for name, method in client.API_METHODS.items():
            print('{:40} {:28} {}'.format(name, method['method'], 'private' if method['auth'] else 'public'))
        return 0

    if args.algorithms:
        print(json.dumps(dict(registry.ALGORITHMS), indent=2))
        return 0

    if args.api_version:
        action, params = get_api_version, {}

    elif args.method is not None:
        if args.method not in client.API_METHODS:
            log.error("Invalid method specified: {}.", args.method)
            arg_parser.print_help()
            return 2

        try:
            inspect.signature(getattr(nicehash.Client, args.method)).bind(None, *args.params)

        except TypeError as e:
            log.error("Invalid parameters for '{}': {}", args.method, e)
            return 2

        if client.API_METHODS[args.method]['auth'] and not (args.id and args.key):
            log.warning("No credentials given for private method '{}', the request will be rejected.", args.method)

        action = call_method
        params = {'method': args.method, 'params': args.params, 'id': args.id, 'key': args.key}

    else:
        arg_parser.print_help()
        return 2

    try:
        result = asyncio.run(action(params, log))

    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
        log.error("Request failed: {}: {}", type(e).__name__, e)
        return 1

    print(json.dumps(result, indent=2))
    return 0


def _get_session() -> aiohttp.ClientSession:
    """
    Create an HTTP client session using the configured timeout and connection limit.
    """

    conn = aiohttp.TCPConnector(limit_per_host=config['http_host_conn_limit'])
    timeout = aiohttp.ClientTimeout(total=config['http_timeout_secs'])
    return aiohttp.ClientSession(connector=conn, timeout=timeout)


async def call_method(params: Dict[str, Any], log: utils.logging.Logger):
    """
    Call a client method and return its response.

    Arguments:
        params:  A dictionary containing the following items:
            'method' (str):          Name of the client method.
            'params' (list):         Positional arguments for the method.
            'id' (str):              API ID, or None.
            'key' (str):             API key, or None.
        log:     Logger for the client.
    """

    async with _get_session() as session:
        api = nicehash.Client(session, api_id=params['id'], api_key=params['key'], log=log)
        return await getattr(api, params['method'])(*params['params'])


async def get_api_version(_: Dict[str, Any], log: utils.logging.Logger):
    """
    Get the API version.
    """

    async with _get_session() as session:
        log.debug("Requesting API version.")
        return await nicehash.Client.get_api_version(session)


def main():
    sys.exit(execute())


if __name__ == '__main__':
    main()
