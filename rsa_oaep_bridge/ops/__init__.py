from .keygen    import KeyGenerator, KeyPair
from .codec     import KeyCodec, RawBlock, armor, public_key_from_numbers
from .encryptor import Encryptor
from .decryptor import Decryptor

__all__ = [
    "KeyGenerator",
    "KeyPair",
    "KeyCodec",
    "RawBlock",
    "armor",
    "public_key_from_numbers",
    "Encryptor",
    "Decryptor",
]
