import pytest

SAMPLE = b"hglaguaghlag\n"
SAMPLE_HEX = "01e9164cf879dd0c62f2b3b9ddf8c54106d497f094379b74abeda5c891c8a99e"
SAMPLE_URI = "di:sha-256;AekWTPh53Qxi8rO53fjFQQbUl_CUN5t0q-2lyJHIqZ4"


@pytest.fixture
def sample_file(tmp_path):
    """Write the sample bytes to a temp file."""
    path = tmp_path / "sample.bin"
    path.write_bytes(SAMPLE)
    return path
