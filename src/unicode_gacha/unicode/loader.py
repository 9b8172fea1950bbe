"""유니코드 데이터 로더

세 데이터 파일을 읽어 UnicodeIndex를 채운다.

UnicodeData.txt에서 "<..., First>" / "<..., Last>" 쌍은 범위 표기이며,
CJK 통합 한자와 한글 음절 범위만 개별 레코드로 확장한다.
그 밖의 꺾쇠 이름(<control>, 사용자 정의 영역, 서로게이트 범위 등)은 저장하지 않는다.
"""

import logging
import struct
from dataclasses import dataclass, replace
from typing import Iterator

from ..data import ResourceLoadError, TextSource
from ..models.unicode import CJKReading, CodePointRecord
from .hangul import hangul_syllable_name, is_hangul_syllable
from .index import UnicodeIndex
from .parser import (
    RecordParseError,
    is_data_line,
    parse_block,
    parse_cjk_reading,
    parse_code_point,
)

logger = logging.getLogger(__name__)

BMP_START = 0x0000
BMP_END = 0xFFFF

_RANGE_FIRST_SUFFIX = "First>"
_RANGE_LAST_SUFFIX = "Last>"
# "<CJK Ideograph, Last>" -> "CJK Ideograph"
_RANGE_LAST_TRIM = len(", Last>")

# 확장 대상 범위 태그
EXPANDED_RANGE_TAGS = ("CJK", "Hangul")


@dataclass
class LoadStats:
    """로드 결과 집계"""

    stored: int = 0
    skipped: int = 0  # 파싱 실패 등으로 건너뛴 줄


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def block_color(name: str) -> str:
    """블록 이름에서 결정적인 색상 (#rrggbb) 계산

    UTF-16 코드 유닛마다 h = h * 31 + unit 을 (h << 5) - h + unit 으로 계산하고,
    시프트 결과는 32비트 부호 있는 정수로 잘린다. 마지막에 0xFFFFFF로 floor-mod.
    이름이 달라도 색이 겹칠 수 있다.
    """
    h = 0
    for (unit,) in struct.iter_unpack("<H", name.encode("utf-16-le")):
        h = _to_int32(_to_int32(h) << 5) - h + unit
    return f"#{h % 0xFFFFFF:06x}"


def expand_range(
    first: int, last: int, template: CodePointRecord, tag: str
) -> Iterator[CodePointRecord]:
    """First/Last 범위를 개별 레코드로 확장

    이름은 "<tag> <HEX>" (한글은 "<tag> <로마자 음절>"), 대문자.
    나머지 필드는 template(Last 레코드)에서 복사.
    """
    hangul = "Hangul" in tag
    for code_point in range(first, last + 1):
        if hangul and is_hangul_syllable(code_point):
            suffix = hangul_syllable_name(code_point)
        else:
            suffix = f"{code_point:X}"
        yield template.replace_id(code_point, f"{tag} {suffix}".upper())


class UnicodeDataLoader:
    """TextSource에서 유니코드 데이터 파일을 읽어 인덱스에 적재"""

    def __init__(
        self,
        source: TextSource,
        unicode_data_file: str = "UnicodeData.txt",
        blocks_file: str = "Blocks.txt",
        cjk_readings_file: str = "Unihan/Unihan_Readings.txt",
    ):
        self.source = source
        self.unicode_data_file = unicode_data_file
        self.blocks_file = blocks_file
        self.cjk_readings_file = cjk_readings_file

    @classmethod
    def from_config(cls, source: TextSource, config) -> "UnicodeDataLoader":
        return cls(
            source,
            unicode_data_file=config.unicode_data_file,
            blocks_file=config.blocks_file,
            cjk_readings_file=config.cjk_readings_file,
        )

    async def load_unicode_data(
        self, index: UnicodeIndex, start: int = BMP_START, end: int = BMP_END
    ) -> LoadStats:
        """UnicodeData.txt 로드 ([start, end] 범위 밖의 id는 건너뜀)

        Raises:
            ResourceLoadError: 파일을 가져오지 못한 경우
        """
        text = await self.source.read_text(self.unicode_data_file)
        stats = LoadStats()
        range_first: int | None = None

        for line_num, line in enumerate(text.splitlines(), 1):
            if not is_data_line(line):
                continue
            try:
                record = parse_code_point(line)
            except RecordParseError as e:
                logger.debug(f"{self.unicode_data_file}:{line_num} 건너뜀 - {e}")
                stats.skipped += 1
                continue

            name = record.name
            if name.endswith(">"):
                if name.endswith(_RANGE_FIRST_SUFFIX):
                    range_first = record.id
                elif name.endswith(_RANGE_LAST_SUFFIX):
                    stats.stored += self._close_range(
                        index, range_first, record, start, end
                    )
                    range_first = None
                continue

            if record.id < start or record.id > end:
                continue
            index.add_code_point(record)
            stats.stored += 1

        logger.info(
            f"UnicodeData 로드: {stats.stored}개 저장, {stats.skipped}줄 건너뜀 "
            f"(범위 U+{start:04X}..U+{end:04X})"
        )
        return stats

    def _close_range(
        self,
        index: UnicodeIndex,
        range_first: int | None,
        last: CodePointRecord,
        start: int,
        end: int,
    ) -> int:
        tag = last.name[1:-_RANGE_LAST_TRIM]
        if range_first is None:
            logger.warning(f"First 없이 Last 발견: U+{last.id:04X} {last.name}")
            return 0
        if not any(t in tag for t in EXPANDED_RANGE_TAGS):
            logger.debug(f"범위 제외: {tag} (U+{range_first:04X}..U+{last.id:04X})")
            return 0

        first = max(range_first, start)
        stop = min(last.id, end)
        count = 0
        for record in expand_range(first, stop, last, tag):
            index.add_code_point(record)
            count += 1
        logger.debug(f"범위 확장: {tag} {count}개")
        return count

    async def load_blocks(self, index: UnicodeIndex) -> LoadStats:
        """Blocks.txt 로드 (기존 블록 목록을 교체)"""
        text = await self.source.read_text(self.blocks_file)
        stats = LoadStats()
        blocks = []

        for line_num, line in enumerate(text.splitlines(), 1):
            if not is_data_line(line):
                continue
            try:
                block = parse_block(line)
            except RecordParseError as e:
                logger.debug(f"{self.blocks_file}:{line_num} 건너뜀 - {e}")
                stats.skipped += 1
                continue
            blocks.append(
                replace(block, id=len(blocks), color=block_color(block.name))
            )

        index.set_blocks(blocks)
        stats.stored = len(blocks)
        logger.info(f"블록 로드: {stats.stored}개")
        return stats

    async def load_cjk_readings(self, index: UnicodeIndex) -> LoadStats:
        """Unihan 읽기 테이블 로드 (코드 포인트별로 파일 순서 유지)"""
        text = await self.source.read_text(self.cjk_readings_file)
        stats = LoadStats()
        readings: dict[int, list[CJKReading]] = {}

        for line_num, line in enumerate(text.splitlines(), 1):
            if not is_data_line(line):
                continue
            try:
                code_point, reading = parse_cjk_reading(line)
            except RecordParseError as e:
                logger.debug(f"{self.cjk_readings_file}:{line_num} 건너뜀 - {e}")
                stats.skipped += 1
                continue
            readings.setdefault(code_point, []).append(reading)
            stats.stored += 1

        index.set_cjk_readings(readings)
        logger.info(f"CJK 읽기 로드: {len(readings)}자, {stats.stored}개 항목")
        return stats


async def init_unicode_index(
    source: TextSource | None = None,
    start: int | None = None,
    end: int | None = None,
    index: UnicodeIndex | None = None,
    config=None,
) -> UnicodeIndex:
    """세 파일을 모두 로드한 인덱스 반환

    Args:
        source: 데이터 소스. None이면 config에서 생성
        start, end: 코드 포인트 범위 (None이면 config.scan_start / scan_end)
        index: 채울 인덱스. None이면 새로 생성
        config: GachaConfig. None이면 전역 config

    Raises:
        ResourceLoadError: 파일 하나라도 가져오지 못한 경우.
            그 전까지 로드된 내용은 index에 남는다.
    """
    if config is None:
        from ..config import config
    if source is None:
        from ..data import source_from_config

        source = source_from_config(config)
    if index is None:
        index = UnicodeIndex()

    start = config.scan_start if start is None else start
    end = config.scan_end if end is None else end

    loader = UnicodeDataLoader.from_config(source, config)
    try:
        await loader.load_unicode_data(index, start, end)
        await loader.load_blocks(index)
        await loader.load_cjk_readings(index)
    except ResourceLoadError as e:
        logger.error(f"유니코드 데이터 초기화 실패 ({source.source_type}): {e}")
        raise

    return index
