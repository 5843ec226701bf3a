"""
basex - 알파벳만 정하면 되는 임의 진법 바이트 인코딩
"""

from .encoding import BaseXError, Encoding, InvalidAlphabet, InvalidCharacter

__version__ = "0.1.0"

__all__ = [
    "BaseXError",
    "Encoding",
    "InvalidAlphabet",
    "InvalidCharacter",
]
