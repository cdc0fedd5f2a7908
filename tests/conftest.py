import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from rsa_oaep_bridge.ops.keygen import KeyGenerator
from rsa_oaep_bridge.ops.codec  import KeyCodec


@pytest.fixture(scope="session")
def keypair():
    return KeyGenerator().generate()


@pytest.fixture(scope="session")
def other_keypair():
    return KeyGenerator().generate()


@pytest.fixture(scope="session")
def private_pem(keypair):
    return KeyCodec.encode_private(keypair.private_key)


@pytest.fixture(scope="session")
def public_pem(keypair):
    return KeyCodec.encode_public(keypair.public_key)
