import base64

import pytest

from stashapi.auth import BasicAuth, BearerAuth, Scheme


def test_scheme_values_match_uri_schemes():
    assert Scheme("http") is Scheme.HTTP
    assert Scheme.HTTPS.value == "https"


def test_basic_header_round_trips():
    password = "password"
    auth = BasicAuth("user", password=password)
    kind, _, encoded = auth.header().partition(" ")
    assert kind == "Basic"
    assert base64.b64decode(encoded).decode("utf-8") == "user:password"


def test_basic_header_known_value():
    password = "password"
    assert BasicAuth("user", password=password).header() == "Basic dXNlcjpwYXNzd29yZA=="


@pytest.mark.parametrize("username", ["jürgen", "a:b", ""])
def test_basic_header_round_trips_any_username(username):
    password = "secret"
    encoded = BasicAuth(username, password=password).header().split(" ", 1)[1]
    assert base64.b64decode(encoded).decode("utf-8") == f"{username}:secret"


def test_bearer_header():
    assert BearerAuth("token").header() == "Bearer token"


def test_credentials_hidden_from_repr():
    password = "password"
    assert "password" not in repr(BasicAuth("user", password=password))
    assert "token" not in repr(BearerAuth("token"))


def test_auth_objects_compare_by_value():
    password = "password"
    assert BasicAuth("user", password=password) == BasicAuth("user", password=password)
    assert BearerAuth("token") != BearerAuth("secret")