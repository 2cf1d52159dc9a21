"""
Password-based payload encryption (AES-GCM, Scrypt KDF)

Sealed payload layout: salt (16) | nonce (12) | ciphertext + tag
"""

import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt


SALT_SIZE = 16
NONCE_SIZE = 12


def derive_key(password: str, salt: bytes) -> bytes:
    kdf = Scrypt(salt=salt, length=32, n=2**14, r=8, p=1)
    return kdf.derive(password.encode("utf-8"))


def seal(data: bytes, password: str) -> bytes:
    """Encrypt data and prepend the salt and nonce"""
    salt = os.urandom(SALT_SIZE)
    nonce = os.urandom(NONCE_SIZE)
    encrypted = AESGCM(derive_key(password, salt)).encrypt(nonce, data, None)
    return salt + nonce + encrypted


def unseal(sealed: bytes, password: str) -> bytes:
    """
    Reverse of seal()

    Raises:
        ValueError: If the password is wrong or the payload is corrupted
    """
    if len(sealed) < SALT_SIZE + NONCE_SIZE:
        raise ValueError("Invalid password or corrupted payload")
    salt = sealed[:SALT_SIZE]
    nonce = sealed[SALT_SIZE:SALT_SIZE + NONCE_SIZE]
    try:
        return AESGCM(derive_key(password, salt)).decrypt(nonce, sealed[SALT_SIZE + NONCE_SIZE:], None)
    except InvalidTag as e:
        raise ValueError("Invalid password or corrupted payload") from e


def seal_if_needed(data: bytes, password: Optional[str]) -> bytes:
    if not password:
        return data
    return seal(data, password)


def unseal_if_needed(data: bytes, password: Optional[str], encrypted: bool) -> bytes:
    """
    Raises:
        ValueError: If the payload is encrypted and no password was given
    """
    if not encrypted:
        return data
    if not password:
        raise ValueError("Payload is encrypted; a password is required")
    return unseal(data, password)
