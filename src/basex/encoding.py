"""
임의 진법(Base-X) 인코딩/디코딩
알파벳 문자열 하나로 base16, base32, base58, base62 등을 모두 표현한다.
비트코인 방식의 leading zero 압축: 앞쪽 0 바이트 하나 = 0번 문자 하나

    >>> hex_ = Encoding("0123456789abcdef")
    >>> hex_.encode(b"\\x00\\x00\\x01")
    '001'
    >>> hex_.decode("001")
    b'\\x00\\x00\\x01'
"""


class BaseXError(ValueError):
    """basex 예외 공통 부모 (ValueError 호환)"""


class InvalidAlphabet(BaseXError):
    """알파벳이 2자 미만이거나 중복 문자가 있을 때"""


class InvalidCharacter(BaseXError):
    """디코딩 대상 문자열에 알파벳에 없는 문자가 있을 때"""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Unrecognized character {character!r} at position {position}")


class Encoding:
    """
    알파벳으로 정의되는 인코딩. 순서가 곧 값이다 (0번 문자 = 0).
    생성 후에는 변경되지 않으므로 여러 스레드에서 그대로 공유해도 된다.
    """

    __slots__ = ("_alphabet", "_base", "_mapper")

    def __init__(self, alphabet: str):
        if not isinstance(alphabet, str):
            raise TypeError(f"alphabet must be str, not {type(alphabet).__name__}")
        if len(alphabet) < 2:
            raise InvalidAlphabet("Alphabet should contain at least 2 characters")

        mapper = {}
        for i, char in enumerate(alphabet):
            if char in mapper:
                raise InvalidAlphabet(f"Ambiguous alphabet: character {char!r} repeats")
            mapper[char] = i

        self._alphabet = alphabet
        self._base = len(alphabet)
        self._mapper = mapper

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def base(self) -> int:
        return self._base

    def encode(self, data) -> str:
        """바이트열 -> 문자열 (빈 입력은 빈 문자열)"""
        # bytes(3) 은 b"\x00\x00\x00" 이 되므로 정수는 따로 막는다
        if isinstance(data, int):
            raise TypeError("data must be a bytes-like object, not int")
        data = bytes(data)
        if not data:
            return ""

        base = self._base
        # base-N 자릿수, 낮은 자리부터
        digits = [0]
        for byte in data:
            carry = byte
            for j in range(len(digits)):
                carry += digits[j] << 8
                digits[j] = carry % base
                carry //= base
            while carry > 0:
                digits.append(carry % base)
                carry //= base

        zero = self._alphabet[0]
        result = []
        # 마지막 바이트는 자릿수 쪽에서 표현되므로 제외
        for byte in data[:-1]:
            if byte != 0:
                break
            result.append(zero)

        result.extend(self._alphabet[d] for d in reversed(digits))
        return "".join(result)

    def decode(self, text: str) -> bytes:
        """문자열 -> 바이트열. 알파벳에 없는 문자가 있으면 InvalidCharacter"""
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        if not text:
            return b""

        base = self._base
        # 256진 바이트, 낮은 자리부터
        buf = bytearray(1)
        for position, char in enumerate(text):
            index = self._mapper.get(char)
            if index is None:
                raise InvalidCharacter(char, position)
            for j in range(len(buf)):
                index += buf[j] * base
                buf[j] = index & 0xFF
                index >>= 8
            while index > 0:
                buf.append(index & 0xFF)
                index >>= 8

        zero = self._alphabet[0]
        for char in text[:-1]:
            if char != zero:
                break
            buf.append(0)

        buf.reverse()
        return bytes(buf)

    def __eq__(self, other):
        if not isinstance(other, Encoding):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self):
        return hash(self._alphabet)

    def __repr__(self):
        return f"Encoding({self._alphabet!r})"
