"""유니코드 인덱스

코드 포인트 → 속성, 블록 범위 목록, 코드 포인트 → CJK 읽기 목록을 보관하고
점/범위 조회를 제공합니다. 로드가 끝난 뒤에는 읽기 전용으로 취급합니다.
"""

from typing import Iterable, Iterator

from ..models.gacha import CardRecord
from ..models.unicode import BlockRecord, CJKReading, CodePointRecord
from .parser import MAX_CODE_POINT


class UnicodeIndex:
    """코드 포인트 / 블록 / CJK 읽기 조회 인덱스

    조회 실패는 예외 대신 None(또는 빈 리스트)으로 알린다.
    """

    def __init__(self):
        self._code_points: dict[int, CodePointRecord] = {}
        self._blocks: list[BlockRecord] = []
        self._cjk_readings: dict[int, list[CJKReading]] = {}

    def __len__(self) -> int:
        return len(self._code_points)

    @property
    def blocks(self) -> tuple[BlockRecord, ...]:
        return tuple(self._blocks)

    @property
    def has_code_points(self) -> bool:
        return bool(self._code_points)

    @property
    def has_blocks(self) -> bool:
        return bool(self._blocks)

    @property
    def has_cjk_readings(self) -> bool:
        return bool(self._cjk_readings)

    # === 로더용 ===

    def add_code_point(self, record: CodePointRecord) -> None:
        """같은 id가 있으면 통째로 덮어씀"""
        self._code_points[record.id] = record

    def set_blocks(self, blocks: Iterable[BlockRecord]) -> None:
        self._blocks = list(blocks)

    def set_cjk_readings(self, readings: dict[int, list[CJKReading]]) -> None:
        self._cjk_readings = readings

    def add_cjk_reading(self, code_point: int, reading: CJKReading) -> None:
        self._cjk_readings.setdefault(code_point, []).append(reading)

    # === 조회 ===

    def get_code_point(self, id: int) -> CodePointRecord | None:
        return self._code_points.get(id)

    def get_block(self, code_point: int) -> BlockRecord | None:
        """코드 포인트가 속한 블록 (양 끝 포함)"""
        for block in self._blocks:
            if block.contains(code_point):
                return block
        return None

    def get_cjk_reading(self, id: int) -> list[CJKReading]:
        """파일 순서의 읽기 목록 (없으면 빈 리스트)"""
        return list(self._cjk_readings.get(id, ()))

    def get_card_data(self, id: int) -> CardRecord | None:
        from ..gacha.card import format_card

        return format_card(self, id)

    def iter_code_points(
        self, start: int = 0, end: int = MAX_CODE_POINT
    ) -> Iterator[CodePointRecord]:
        """[start, end] 범위의 레코드를 id 오름차순으로"""
        for id in sorted(k for k in self._code_points if start <= k <= end):
            yield self._code_points[id]
