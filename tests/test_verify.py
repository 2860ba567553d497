import io

from uri_di.core.compute import compute
from uri_di.core.uri import DigestURI
from uri_di.core.verify import verify

from conftest import SAMPLE, SAMPLE_HEX, SAMPLE_URI


class TestVerify:
    def test_matching_content(self):
        result = verify(SAMPLE_URI, SAMPLE)
        assert result.verified
        assert result.uri == SAMPLE_URI
        assert result.algorithm == "sha-256"
        assert result.expected == SAMPLE_HEX
        assert result.actual == SAMPLE_HEX
        assert result.error is None

    def test_accepts_uri_object(self):
        assert verify(DigestURI.parse(SAMPLE_URI), io.BytesIO(SAMPLE)).verified

    def test_file(self, sample_file):
        with sample_file.open("rb") as handle:
            assert verify(SAMPLE_URI, handle).verified

    def test_modified_content(self):
        result = verify(SAMPLE_URI, b"hglaguaghlaG\n")
        assert not result.verified
        assert result.expected == SAMPLE_HEX
        assert result.actual != SAMPLE_HEX
        assert "does not match" in result.error

    def test_uses_uri_algorithm(self):
        uri = compute(SAMPLE, "sha-384")
        assert verify(uri, SAMPLE).verified
        assert not verify(uri, b"other").verified

    def test_ignores_query(self):
        assert verify(SAMPLE_URI + "?ct=text%2Fplain", SAMPLE).verified

    def test_uri_without_digest(self):
        result = verify("di:sha-256", SAMPLE)
        assert not result.verified
        assert result.error == "URI has no digest"

    def test_uri_without_algorithm(self):
        result = verify("di:", SAMPLE)
        assert not result.verified
        assert result.error == "URI has no algorithm"
