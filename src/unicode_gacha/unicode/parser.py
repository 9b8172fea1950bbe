"""유니코드 데이터 파일 파서

파일 형식:
- UnicodeData.txt: 세미콜론으로 구분된 15개 필드 (0번은 16진수 코드 포인트)
- Blocks.txt: "0000..007F; Basic Latin"
- Unihan_Readings.txt: 탭 구분 "U+3400<TAB>kMandarin<TAB>qiū"
"""

from ..models.unicode import BlockRecord, CJKReading, CodePointRecord

CODE_POINT_FIELD_COUNT = 15
MAX_CODE_POINT = 0x10FFFF


class RecordParseError(ValueError):
    """잘못된 형식의 한 줄 (로더가 건너뜀)"""


def is_data_line(line: str) -> bool:
    """빈 줄과 # 주석 줄 제외"""
    return bool(line.strip()) and not line.startswith("#")


def _parse_hex(text: str, line: str) -> int:
    try:
        value = int(text, 16)
    except ValueError:
        raise RecordParseError(f"16진수 해석 실패: {text!r} ({line!r})") from None
    if not 0 <= value <= MAX_CODE_POINT:
        raise RecordParseError(f"코드 포인트 범위 초과: {text!r}")
    return value


def parse_code_point(line: str) -> CodePointRecord:
    """UnicodeData.txt 한 줄 파싱"""
    parts = line.rstrip("\r\n").split(";")
    if len(parts) != CODE_POINT_FIELD_COUNT:
        raise RecordParseError(
            f"필드 수 불일치: {len(parts)} (기대값 {CODE_POINT_FIELD_COUNT})"
        )
    return CodePointRecord(_parse_hex(parts[0], line), *parts[1:], code=parts[0])


def parse_block(line: str) -> BlockRecord:
    """Blocks.txt 한 줄 파싱 (id, color는 로더가 채움)"""
    parts = line.rstrip("\r\n").split(";")
    if len(parts) < 2:
        raise RecordParseError(f"블록 이름 없음: {line!r}")

    bounds = parts[0].strip().split("..")
    if len(bounds) != 2:
        raise RecordParseError(f"블록 범위 형식 오류: {parts[0]!r}")

    start = _parse_hex(bounds[0], line)
    end = _parse_hex(bounds[1], line)
    if start > end:
        raise RecordParseError(f"역전된 블록 범위: {parts[0]!r}")

    return BlockRecord(id=0, start=start, end=end, name=parts[1].strip(), color="")


def parse_cjk_reading(line: str) -> tuple[int, CJKReading]:
    """Unihan 읽기 한 줄 파싱

    Returns:
        (코드 포인트, CJKReading)
    """
    parts = line.rstrip("\r\n").split("\t")
    if len(parts) < 3:
        raise RecordParseError(f"필드 수 부족: {line!r}")

    code = parts[0]
    if not code.startswith("U+"):
        raise RecordParseError(f"U+ 접두사 없음: {code!r}")

    return _parse_hex(code[2:], line), CJKReading(field=parts[1], text=parts[2])
