import requests

from brainz.listens import delete_listen
from conftest import API_URL, DELETE_URL, make_listen


def _delete(listen):
    return delete_listen(requests.Session(), API_URL, "secret-token", listen, timeout=5)


def test_delete_posts_listen_identity(requests_mock):
    requests_mock.post(DELETE_URL, status_code=200, json={"status": "ok"})

    assert _delete(make_listen(1_700_000_000, msid="b5a2-msid")) is True

    request = requests_mock.last_request
    assert request.method == "POST"
    assert request.json() == {"listened_at": "1700000000", "recording_msid": "b5a2-msid"}
    assert request.headers["Authorization"] == "Token secret-token"
    assert request.headers["Content-Type"] == "application/json"


def test_delete_not_found(requests_mock):
    requests_mock.post(DELETE_URL, status_code=404, json={"code": 404, "error": "Listen not found"})
    assert _delete(make_listen(300)) is False


def test_delete_only_200_counts(requests_mock):
    requests_mock.post(DELETE_URL, status_code=204)
    assert _delete(make_listen(300)) is False


def test_delete_transport_error_is_not_fatal(requests_mock):
    requests_mock.post(DELETE_URL, exc=requests.exceptions.ConnectionError)
    assert _delete(make_listen(300)) is False
