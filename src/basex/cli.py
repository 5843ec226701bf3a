"""
Base-X 인코딩 확인용 커맨드라인 도구

사용법:
  basex encode 00000001                  # hex 바이트 -> base58 문자열
  basex decode 12 -a base58              # 문자열 -> hex 바이트
  basex encode deadbeef -a 0123456789abcdef
  BASEX_ALPHABET=base62 basex encode ff
"""

import argparse
import os
import sys

from .alphabets import resolve
from .encoding import Encoding

# BASEX_ALPHABET 환경 변수가 없을 때 쓰는 알파벳
DEFAULT_ALPHABET = "base58"


def _label(alphabet: str, encoding: Encoding) -> str:
    # 알파벳 문자열을 직접 준 경우엔 진법만 표시
    if encoding.alphabet == alphabet:
        return f"base{encoding.base}"
    return alphabet


def encode_hex(hex_data: str, alphabet: str, verbose: bool = False) -> str:
    """
    hex 문자열을 바이트로 바꾼 뒤 alphabet 으로 인코딩합니다.
    """
    encoding = resolve(alphabet)
    data = bytes.fromhex(hex_data.strip())
    text = encoding.encode(data)
    if verbose:
        print(f"  [{_label(alphabet, encoding)} 인코딩] {len(data)} bytes → \"{text}\"")
    return text


def decode_to_hex(text: str, alphabet: str, verbose: bool = False) -> str:
    """
    alphabet 으로 인코딩된 문자열을 디코딩해 hex 문자열로 반환합니다.
    """
    encoding = resolve(alphabet)
    data = encoding.decode(text)
    if verbose:
        print(f"  [{_label(alphabet, encoding)} 디코딩] \"{text}\" → {len(data)} bytes")
    return data.hex()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="basex",
        description="임의 진법 인코딩: encode(hex → 문자열) / decode(문자열 → hex)",
    )
    parser.add_argument(
        "-a", "--alphabet",
        default=os.environ.get("BASEX_ALPHABET", DEFAULT_ALPHABET),
        help="알파벳 이름(base2, base16, base32, base36, base58, base62) 또는 알파벳 문자열",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="변환 과정을 출력합니다")
    sub = parser.add_subparsers(dest="command", required=True)

    # encode: hex 바이트 -> 문자열
    p_encode = sub.add_parser("encode", help="hex 바이트를 인코딩합니다")
    p_encode.add_argument("hex", help="인코딩할 바이트 (hex, 예: 0001ff)")

    # decode: 문자열 -> hex 바이트
    p_decode = sub.add_parser("decode", help="문자열을 디코딩해 hex 로 출력합니다")
    p_decode.add_argument("text", help="디코딩할 문자열")

    args = parser.parse_args(argv)

    try:
        if args.command == "encode":
            print(encode_hex(args.hex, args.alphabet, args.verbose))
        elif args.command == "decode":
            print(decode_to_hex(args.text, args.alphabet, args.verbose))
    except KeyError as e:
        print(f"오류: {e.args[0]}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"오류: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
