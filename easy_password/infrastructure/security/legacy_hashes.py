"""Legacy credential hash encodings

These exist only to populate old authentication stores (LDAP userPassword
values, Samba/Windows NT and LM hashes). None of them is a safe way to
store a new password.
"""

import base64
import hashlib

from Crypto.Hash import MD4
from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from cryptography.hazmat.primitives.ciphers import Cipher, modes

LM_MAGIC = b"KGS!@#$%"
LM_PASSWORD_LENGTH = 14


def _b64(digest: bytes) -> str:
    return base64.b64encode(digest).decode("ascii")


def md5(password: str) -> str:
    """LDAP-style ``{MD5}`` value: base64 of the raw MD5 digest"""
    return "{MD5}" + _b64(hashlib.md5(password.encode("utf-8")).digest())


def sha(password: str) -> str:
    """LDAP-style ``{SHA}`` value: base64 of the raw SHA-1 digest"""
    return "{SHA}" + _b64(hashlib.sha1(password.encode("utf-8")).digest())


def sha256(password: str) -> str:
    """``{sha256}`` value: base64 of the raw SHA-256 digest

    The lowercase tag is what consumers of this format expect.
    """
    return "{sha256}" + _b64(hashlib.sha256(password.encode("utf-8")).digest())


def ntlm(password: str) -> str:
    """NT hash: hex MD4 digest of the UTF-16LE encoded password"""
    return MD4.new(password.encode("utf-16-le")).hexdigest()


def _expand_des_key(key56: bytes) -> bytes:
    """Spread 7 key bytes over 8, appending an odd-parity bit to every 7 bits"""
    bits = int.from_bytes(key56, "big")
    key = bytearray()
    for shift in range(49, -1, -7):
        group = (bits >> shift) & 0x7F
        parity = 1 if bin(group).count("1") % 2 == 0 else 0
        key.append((group << 1) | parity)
    return bytes(key)


def _des_encrypt_block(key56: bytes, block: bytes) -> bytes:
    # K1 = K2 = K3 makes TripleDES encrypt exactly like single DES
    cipher = Cipher(TripleDES(_expand_des_key(key56) * 3), modes.ECB())
    encryptor = cipher.encryptor()
    return encryptor.update(block) + encryptor.finalize()


def lmhash(password: str) -> str:
    """
    LAN Manager hash.

    Only the first 14 characters count; they are uppercased and null-padded
    to 14 characters, so this never fails on long or empty passwords. Each
    7-character half keys a DES encryption of the "KGS!@#$%" constant with
    the first 56 bits of its UTF-8 encoding. The algorithm is only defined
    for ASCII; other characters are accepted but match no Windows hash.

    Args:
        password: Plain text password

    Returns:
        32 lowercase hex characters
    """
    secret = password[:LM_PASSWORD_LENGTH].upper()[:LM_PASSWORD_LENGTH]
    secret = secret.ljust(LM_PASSWORD_LENGTH, "\x00")
    halves = (secret[:7], secret[7:])
    return b"".join(
        _des_encrypt_block(half.encode("utf-8")[:7], LM_MAGIC) for half in halves
    ).hex()
