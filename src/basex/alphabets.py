"""
자주 쓰는 알파벳 모음
"""

from functools import lru_cache

from .encoding import Encoding

BASE2 = "01"
BASE16 = "0123456789abcdef"
BASE32 = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
# 비트코인 알파벳 (0, O, I, l 제외)
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
# URL 단축 코드용
BASE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

ALPHABETS = {
    "base2": BASE2,
    "base16": BASE16,
    "base32": BASE32,
    "base36": BASE36,
    "base58": BASE58,
    "base62": BASE62,
}


@lru_cache(maxsize=None)
def _load(key: str) -> Encoding:
    return Encoding(ALPHABETS[key])


def get(name: str) -> Encoding:
    """이름(대소문자 무시)으로 Encoding 조회. 인스턴스는 공유된다."""
    key = name.strip().lower()
    if key not in ALPHABETS:
        raise KeyError(f"unknown alphabet {name!r} (known: {', '.join(ALPHABETS)})")
    return _load(key)


def resolve(spec: str) -> Encoding:
    """알려진 이름이면 해당 Encoding, 아니면 spec 자체를 알파벳으로 사용"""
    if spec.strip().lower() in ALPHABETS:
        return get(spec)
    return Encoding(spec)
