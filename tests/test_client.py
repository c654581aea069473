import asyncio
import urllib.parse

import pytest

import nicehash

from nicehash import configuration

TEST_ADDRESS = '1P5PNW6Wd53QiZLdCs9EXNHmuPTX3rD6hW'
AUTH = 'id=testApiId&key=testApiKey'


@pytest.fixture
def client(session):
    return nicehash.Client(session, api_id='testApiId', api_key='testApiKey')


def test_has_credentials(session):
    client = nicehash.Client(session, api_id='12345')
    assert client.has_credentials() is False

    client.api_key = 'test'
    assert client.has_credentials() is True


@pytest.mark.parametrize('api_id,api_key', [(None, None), ('', 'key'), ('id', ''), (None, 'key')])
def test_has_credentials_requires_both(session, api_id, api_key):
    assert nicehash.Client(session, api_id=api_id, api_key=api_key).has_credentials() is False


def test_credentials_default_to_none(session):
    client = nicehash.Client(session)
    assert client.api_id is None
    assert client.api_key is None


@pytest.mark.asyncio
async def test_returns_response_unmodified(session, client):
    session.payload = {'result': {'stats': [{'algo': 3}]}, 'method': 'stats.global.current'}
    response = await client.get_global_current_stats()
    assert response is session.payload


@pytest.mark.asyncio
async def test_sends_user_agent(session, client):
    await client.get_global_24h_stats()
    assert session.calls[0]['headers']['user-agent'].startswith('nicehash-python/{} '.format(nicehash.__version__))


@pytest.mark.asyncio
async def test_uses_base_url(session, client):
    await client.get_global_24h_stats()
    url = session.calls[0]['url']
    assert '{}://{}{}'.format(url.scheme, url.host, url.path) == 'https://api.nicehash.com/api'


@pytest.mark.asyncio
async def test_base_url_is_read_from_config(session, client):
    configuration.config['api_base_url'] = 'http://localhost:8080/api'
    await client.get_global_24h_stats()
    assert str(session.calls[0]['url']) == 'http://localhost:8080/api?method=stats.global.24h'


@pytest.mark.asyncio
@pytest.mark.parametrize('call,expected', [
    (lambda c: c.get_global_current_stats(), 'method=stats.global.current'),
    (lambda c: c.get_global_current_stats(1), 'method=stats.global.current&location=1'),
    (lambda c: c.get_global_current_stats(0), 'method=stats.global.current&location=0'),
    (lambda c: c.get_global_24h_stats(), 'method=stats.global.24h'),
    (lambda c: c.get_provider_stats(TEST_ADDRESS), 'method=stats.global.24h&addr=' + TEST_ADDRESS),
    (lambda c: c.get_detailed_provider_stats(TEST_ADDRESS),
     'method=stats.provider.ex&addr={}&from=0'.format(TEST_ADDRESS)),
    (lambda c: c.get_detailed_provider_stats(TEST_ADDRESS, '1500000000'),
     'method=stats.provider.ex&addr={}&from=1500000000'.format(TEST_ADDRESS)),
    (lambda c: c.get_provider_workers_stats(TEST_ADDRESS, 3),
     'method=stats.provider.workers&addr={}&algo=3'.format(TEST_ADDRESS)),
    (lambda c: c.get_all_provider_workers_stats(TEST_ADDRESS), 'method=stats.provider.workers&addr=' + TEST_ADDRESS),
    (lambda c: c.get_orders(1, 3), 'method=orders.get&location=1&algo=3'),
    (lambda c: c.get_multi_algorithm_mining_info(), 'method=multialgo.info'),
    (lambda c: c.get_simple_multi_algorithm_mining_info(), 'method=simplemultialgo.info'),
    (lambda c: c.get_needed_buying_info(), 'method=buy.info'),
])
async def test_public_query_strings(session, client, call, expected):
    await call(client)
    assert session.query_strings == [expected]


@pytest.mark.asyncio
@pytest.mark.parametrize('call,expected', [
    (lambda c: c.get_my_orders(1, 3), 'method=orders.get&location=1&algo=3&my='),
    (lambda c: c.refill_order(0, 3, 123, 0.01), 'method=orders.refill&location=0&algo=3&order=123&amount=0.01'),
    (lambda c: c.remove_order(0, 3, 123), 'method=orders.remove&location=0&algo=3&order=123'),
    (lambda c: c.set_order_price(0, 3, 123, 2.1), 'method=orders.set.price&location=0&algo=3&order=123&price=2.1'),
    (lambda c: c.decrease_order_price(0, 3, 123), 'method=orders.set.price.decrease&location=0&algo=3&order=123'),
    (lambda c: c.set_order_limit(0, 3, 123, 0), 'method=orders.set.limit&location=0&algo=3&order=123&limit=0'),
    (lambda c: c.get_my_balance(), 'method=balance'),
])
async def test_private_query_strings_end_with_credentials(session, client, call, expected):
    await call(client)
    assert session.query_strings == ['{}&{}'.format(expected, AUTH)]


@pytest.mark.asyncio
async def test_create_order_encodes_pool_credentials(session, client):
    await client.create_order(0, 3, 0.01, 0.5, 0, 'stratum.example.com', 3333, 'worker/rig1@example.com', 'x')

    query = session.query_strings[0]
    assert query == ('method=orders.create&location=0&algo=3&amount=0.01&price=0.5&limit=0'
                     '&pool_host=stratum.example.com&pool_port=3333&pool_user=worker%2Frig1%40example.com'
                     '&pool_pass=x&' + AUTH)
    assert urllib.parse.parse_qs(query)['pool_user'] == ['worker/rig1@example.com']


@pytest.mark.asyncio
async def test_create_order_sends_two_factor_code_after_limit(session, client):
    await client.create_order(1, 20, 0.5, 1.2, 5, 'pool.example.com', 4444, 'user', 'pass', code='123456')

    names = [name for name, _ in urllib.parse.parse_qsl(session.query_strings[0], keep_blank_values=True)]
    assert names == ['method', 'location', 'algo', 'amount', 'price', 'limit', 'code',
                     'pool_host', 'pool_port', 'pool_user', 'pool_pass', 'id', 'key']


@pytest.mark.asyncio
async def test_private_call_without_credentials_omits_them(session):
    client = nicehash.Client(session)
    await client.get_my_orders(1, 3)
    assert session.query_strings == ['method=orders.get&location=1&algo=3&my=']


@pytest.mark.asyncio
async def test_caller_cannot_override_remote_method(session, client):
    await client.call('get_my_balance', {'method': 'orders.remove'})
    await client.call('get_orders', {'method': 'balance', 'location': 0, 'algo': 1})
    assert session.query_strings == ['method=balance&' + AUTH, 'method=orders.get&location=0&algo=1']


@pytest.mark.asyncio
async def test_spaces_and_plus_are_percent_encoded(session, client):
    await client.create_order(0, 3, 0.01, 0.5, 0, 'pool.example.com', 3333, 'my worker', 'a+b c')

    query = session.query_strings[0]
    assert '&pool_user=my%20worker&pool_pass=a%2Bb%20c&' in query
    assert urllib.parse.parse_qs(query)['pool_pass'] == ['a+b c']


@pytest.mark.asyncio
async def test_credentials_replace_caller_keys(session, client):
    await client.call('get_my_orders', {'key': 'other', 'location': 1, 'id': 'other'})
    assert session.query_strings == ['method=orders.get&location=1&' + AUTH]


@pytest.mark.asyncio
async def test_credentials_are_read_on_each_call(session, client):
    await client.get_my_balance()
    client.api_key = 'rotatedKey'
    await client.get_my_balance()
    assert session.query_strings == ['method=balance&' + AUTH, 'method=balance&id=testApiId&key=rotatedKey']


@pytest.mark.asyncio
async def test_public_call_ignores_credentials(session, client):
    await client.get_orders(0, 1)
    assert 'id=' not in session.query_strings[0]
    assert 'key=' not in session.query_strings[0]


@pytest.mark.asyncio
async def test_unknown_method_raises(session, client):
    with pytest.raises(KeyError):
        await client.call('get_everything')
    assert session.calls == []


@pytest.mark.asyncio
async def test_concurrent_calls_do_not_share_params(session, client):
    await asyncio.gather(
        client.get_orders(0, 1),
        client.get_my_orders(1, 3),
        client.get_provider_workers_stats(TEST_ADDRESS, 5),
        client.get_global_24h_stats(),
    )

    assert sorted(session.query_strings) == sorted([
        'method=orders.get&location=0&algo=1',
        'method=orders.get&location=1&algo=3&my=&' + AUTH,
        'method=stats.provider.workers&addr={}&algo=5'.format(TEST_ADDRESS),
        'method=stats.global.24h',
    ])
    assert session.calls[0]['headers'] is not session.calls[1]['headers']


@pytest.mark.asyncio
async def test_api_version_has_no_method(session):
    await nicehash.Client.get_api_version(session)
    assert str(session.calls[0]['url']) == 'https://api.nicehash.com/api'
    assert session.query_strings == ['']


def test_algorithm_lookups_on_client():
    assert nicehash.Client.get_algorithm_name(3) == 'x11'
    assert nicehash.Client.get_algorithm_code('x11') == 3
    assert nicehash.Client.get_algorithm_name(123) is None
    assert nicehash.Client.get_algorithm_code('not-a-real-algo') is None
