import pytest

from mws_query.signing.query import Query


@pytest.fixture
def query_params():
    return {
        "verb": "GET",
        "uri_path": "/",
        "host": "mws-eu.amazonservices.com",
        "access_key_id": "key",
        "secret_access_key": "secret",
        "action": "ListOrders",
        "seller_id": "Seller ID",
        "version": "2010-01-01",
        "timestamp": "2013-01-01T00:00:00-02:00",
    }


@pytest.fixture
def query(query_params):
    return Query(**query_params)


@pytest.fixture
def token_query(query_params):
    return Query(**query_params, mws_auth_token="auth_token")
