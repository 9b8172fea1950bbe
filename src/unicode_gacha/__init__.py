"""Unicode 문자 가챠

유니코드 문자 데이터베이스(UnicodeData.txt, Blocks.txt, Unihan 읽기 테이블)를
메모리 인덱스로 로드하고, 그 위에서 가중치 기반 뽑기를 제공합니다.
"""

from .gacha import Pool, format_card, uniform_code_points
from .unicode import UnicodeIndex, init_unicode_index

__all__ = [
    "Pool",
    "UnicodeIndex",
    "format_card",
    "init_unicode_index",
    "uniform_code_points",
]
