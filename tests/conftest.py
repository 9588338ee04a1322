import json
import pytest
from jwe_core.utils import b64u_encode


def b64u_json(obj, **kwargs) -> str:
    return b64u_encode(json.dumps(obj, **kwargs).encode("utf-8"))


@pytest.fixture
def dir_protected():
    # {"alg":"dir","enc":"A128GCM"}
    return "eyJhbGciOiJkaXIiLCJlbmMiOiJBMTI4R0NNIn0"


@pytest.fixture
def flattened_message():
    return {
        "protected": b64u_encode(b'{"enc":"A128GCM","alg":"RSA-OAEP"}'),
        "unprotected": {"jku": "https://example.com/keys.json"},
        "header": {"kid": "recipient-1"},
        "aad": "ZXh0cmE",
        "encrypted_key": "a2V5",
        "iv": "YWJj",
        "ciphertext": "ZGVm",
        "tag": "Z2hp",
    }


@pytest.fixture
def general_message():
    return {
        "protected": b64u_json({"enc": "A256GCM"}),
        "unprotected": {"jku": "https://example.com/keys.json"},
        "recipients": [
            {"header": {"alg": "RSA1_5", "kid": "rsa-1"}, "encrypted_key": "a2V5MQ"},
            {"header": {"alg": "A128KW", "kid": "aes-1"}, "encrypted_key": "a2V5Mg"},
        ],
        "iv": "YWJj",
        "ciphertext": "ZGVm",
        "tag": "Z2hp",
    }
