import pytest
import requests
from unittest.mock import MagicMock

from services.api import ApiClient, ApiError
from services.storage import TokenStore


def _response(status=200, body=None, content=b"{}"):
    resp = MagicMock()
    resp.ok = 200 <= status < 300
    resp.status_code = status
    resp.content = content
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body if body is not None else {}
    return resp


def _client(resp=None, token=None, profile_path=None):
    session = MagicMock()
    if resp is not None:
        session.request.return_value = resp
    store = TokenStore({"token": token} if token else {})
    return ApiClient("http://api.test/", token_store=store, timeout=3,
                     profile_path=profile_path, session=session), session


def test_register_posts_json():
    client, session = _client(_response(201, {"id": "u1"}))
    fields = {"firstName": "Ada", "lastName": "L", "age": "36", "email": "a@b.co",
              "password": "p", "confirmPassword": "p", "extra": "dropped"}
    assert client.register_user(fields) == {"id": "u1"}
    method, url = session.request.call_args.args
    kwargs = session.request.call_args.kwargs
    assert (method, url) == ("POST", "http://api.test/api/v1/users")
    assert "extra" not in kwargs["json"]
    assert kwargs["timeout"] == 3
    assert "Authorization" not in kwargs["headers"]


def test_reset_password_puts_token_in_path():
    client, session = _client(_response(200, {"ok": True}))
    client.reset_password("tok", "A1!aaaaa", "A1!aaaaa")
    method, url = session.request.call_args.args
    assert url == "http://api.test/api/v1/users/reset-password/tok"
    assert session.request.call_args.kwargs["json"] == {
        "newPassword": "A1!aaaaa", "confirmPassword": "A1!aaaaa"}


def test_error_message_comes_from_body():
    client, _ = _client(_response(401, {"message": "Invalid credentials"}))
    with pytest.raises(ApiError) as exc:
        client.login_user("a@b.co", "x")
    assert str(exc.value) == "Invalid credentials"
    assert exc.value.status == 401


def test_error_without_body_falls_back_to_status():
    client, _ = _client(_response(502, ValueError("no json"), content=b"<html>"))
    with pytest.raises(ApiError) as exc:
        client.send_recovery_email("a@b.co")
    assert str(exc.value) == "Request failed with status 502"


def test_network_error_becomes_api_error():
    client, session = _client()
    session.request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(ApiError) as exc:
        client.send_recovery_email("a@b.co")
    assert str(exc.value).startswith("Network error: ")


def test_profile_requires_configured_path():
    client, session = _client(_response(200, {}))
    with pytest.raises(ApiError):
        client.get_user_profile_info()
    session.request.assert_not_called()


def test_profile_sends_bearer_token():
    client, session = _client(_response(200, {"email": "a@b.co"}), token="jwt",
                              profile_path="/api/v1/users/me")
    assert client.get_user_profile_info() == {"email": "a@b.co"}
    method, url = session.request.call_args.args
    assert (method, url) == ("GET", "http://api.test/api/v1/users/me")
    assert session.request.call_args.kwargs["headers"]["Authorization"] == "Bearer jwt"


def test_empty_body_is_empty_payload():
    client, _ = _client(_response(204, None, content=b""))
    assert client.create_list("Groceries") == {}
