"""Hash encoders and stock password strategies"""

from .legacy_hashes import lmhash, md5, ntlm, sha, sha256
from .password_validator import PasswordValidator, register_defaults

__all__ = [
    "md5",
    "sha",
    "sha256",
    "ntlm",
    "lmhash",
    "PasswordValidator",
    "register_defaults",
]
