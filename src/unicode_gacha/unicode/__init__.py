"""유니코드 데이터 처리 모듈

- parser: 원본 텍스트 파일의 한 줄을 레코드로 변환
- hangul: 한글 음절 로마자 이름 생성
- loader: 세 데이터 파일을 인덱스로 로드 (First/Last 범위 확장 포함)
- index: 코드 포인트 / 블록 / CJK 읽기 조회
"""

from .hangul import hangul_syllable_name, is_hangul_syllable
from .index import UnicodeIndex
from .loader import LoadStats, UnicodeDataLoader, block_color, expand_range, init_unicode_index
from .parser import RecordParseError, parse_block, parse_cjk_reading, parse_code_point

__all__ = [
    "UnicodeIndex",
    "UnicodeDataLoader",
    "LoadStats",
    "RecordParseError",
    "block_color",
    "expand_range",
    "hangul_syllable_name",
    "init_unicode_index",
    "is_hangul_syllable",
    "parse_block",
    "parse_cjk_reading",
    "parse_code_point",
]
