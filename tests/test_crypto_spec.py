from uri_di.crypto_spec import CryptoSpec, TripletDescriptor


def test_three_fields():
    spec = CryptoSpec("aes:deadbeef:0011")
    assert spec.cipher == "aes"
    assert spec.key == "deadbeef"
    assert spec.iv == "0011"


def test_cipher_only():
    spec = CryptoSpec("aes")
    assert spec.cipher == "aes"
    assert spec.key == ""
    assert spec.iv == ""


def test_no_iv():
    spec = CryptoSpec("aes-128-cbc:deadbeef")
    assert spec.cipher == "aes-128-cbc"
    assert spec.key == "deadbeef"
    assert spec.iv == ""


def test_iv_keeps_remaining_colons():
    spec = CryptoSpec("aes:k:00:11:22")
    assert spec.key == "k"
    assert spec.iv == "00:11:22"


def test_empty_fields():
    spec = CryptoSpec("aes::0011")
    assert spec.key == ""
    assert spec.iv == "0011"
    assert CryptoSpec("").cipher == ""


def test_string_round_trip():
    for text in ("aes:deadbeef:0011", "aes", "a:b:c:d", ""):
        assert str(CryptoSpec(text)) == text


def test_alias_and_equality():
    assert TripletDescriptor("aes:k:iv") == CryptoSpec("aes:k:iv")
    assert CryptoSpec("aes:k:iv") != CryptoSpec("aes:k:iw")
