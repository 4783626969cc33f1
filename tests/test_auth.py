from product_api.auth import authenticate, read_api_key
from product_api.errors import ErrorKind


def test_primary_header_wins():
    assert read_api_key({"x-api-key": "a", "api-key": "b"}) == "a"


def test_fallback_header():
    assert read_api_key({"api-key": "b"}) == "b"
    assert read_api_key({"x-api-key": "", "api-key": "b"}) == "b"


def test_no_header():
    assert read_api_key({}) is None


def test_authenticate():
    assert authenticate("s3cret", "s3cret") is None
    for value in (None, "", "S3CRET", "s3cret "):
        err = authenticate(value, "s3cret")
        assert err.kind is ErrorKind.AUTH
        assert err.status == 401
