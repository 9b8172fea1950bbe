"""가중치 기반 뽑기 풀

룰렛 휠 방식: [0, 총 가중치) 범위의 난수를 뽑고, 삽입 순서대로 누적 가중치가
처음으로 난수를 넘는 항목을 선택한다. 복원 추출이므로 같은 항목이 여러 번 나올 수 있다.

풀 구성은 시딩 전략(인덱스 → (id, weight) 나열 함수)으로 결정한다.
    BMP 균등 풀: Pool(seed=uniform_code_points(0x0000, 0xFFFF))
"""

import asyncio
import logging
import random
from bisect import bisect_right
from itertools import accumulate
from typing import Callable, Iterable, Protocol

from ..data import TextSource
from ..models.gacha import CardRecord, PoolItem
from ..unicode.index import UnicodeIndex
from ..unicode.loader import BMP_END, BMP_START, init_unicode_index
from .card import format_card

logger = logging.getLogger(__name__)

SeedStrategy = Callable[[UnicodeIndex], Iterable[tuple[int, float]]]


class RandomSource(Protocol):
    def random(self) -> float: ...


def uniform_code_points(
    start: int = BMP_START, end: int = BMP_END, weight: float = 1
) -> SeedStrategy:
    """[start, end] 범위에서 인덱스에 있는 코드 포인트마다 같은 가중치"""

    def seed(index: UnicodeIndex) -> Iterable[tuple[int, float]]:
        for record in index.iter_code_points(start, end):
            yield record.id, weight

    return seed


def weighted_by_block(
    weights: dict[str, float],
    default: float = 1,
    start: int = BMP_START,
    end: int = BMP_END,
) -> SeedStrategy:
    """블록 이름별 가중치 (목록에 없는 블록과 블록 밖 코드 포인트는 default)

    가중치가 0인 코드 포인트는 풀에 넣지 않는다.
    """

    def seed(index: UnicodeIndex) -> Iterable[tuple[int, float]]:
        for record in index.iter_code_points(start, end):
            block = index.get_block(record.id)
            weight = weights.get(block.name, default) if block else default
            if weight > 0:
                yield record.id, weight

    return seed


class Pool:
    """가중치 뽑기 풀

    Args:
        index: 카드 변환에 쓸 인덱스. None이면 initialize()에서 직접 로드
        seed: 시딩 전략. None이면 add_item()으로만 채움
        rng: random() 메서드를 가진 난수 생성기. None이면 random.Random()
        source: index가 없을 때 로드에 쓸 데이터 소스 (None이면 config 기준)
    """

    def __init__(
        self,
        index: UnicodeIndex | None = None,
        seed: SeedStrategy | None = None,
        rng: RandomSource | None = None,
        source: TextSource | None = None,
    ):
        self.index = index
        self.items: list[PoolItem] = []
        self._seed = seed
        self._rng = rng if rng is not None else random.Random()
        self._source = source
        self._initialized = False
        self._init_lock: asyncio.Lock | None = None

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def total_weight(self) -> float:
        return sum(item.weight for item in self.items)

    def add_item(self, item: PoolItem) -> None:
        if item.weight < 0:
            raise ValueError(f"음수 가중치: {item}")
        self.items.append(item)

    async def initialize(self) -> None:
        """인덱스 로드(필요 시)와 시딩을 한 번만 수행"""
        if self._initialized:
            return

        if self._init_lock is None:
            self._init_lock = asyncio.Lock()
        async with self._init_lock:
            # 동시에 기다리던 호출은 여기서 빠짐
            if self._initialized:
                return

            if self.index is None:
                logger.info("외부 인덱스 없음 - 풀 전용 인덱스 로드")
                self.index = await init_unicode_index(self._source)

            if self._seed is not None:
                for id, weight in self._seed(self.index):
                    self.add_item(PoolItem(id=id, weight=weight))

            self._initialized = True
            logger.info(f"풀 초기화: {len(self.items)}개 항목")

    def draw(self, amount: int = 1) -> list[PoolItem]:
        """amount번 복원 추출 (빈 풀이거나 amount <= 0이면 빈 리스트)"""
        if not self.items or amount <= 0:
            return []

        cumulative = list(accumulate(item.weight for item in self.items))
        total = cumulative[-1]
        if total <= 0:
            logger.warning("총 가중치가 0인 풀에서 뽑기 요청")
            return []

        # 반올림으로 value == total 이 되면 마지막 양수 가중치 항목
        last = max(i for i, item in enumerate(self.items) if item.weight > 0)
        results = []
        for _ in range(amount):
            value = self._rng.random() * total
            # 누적 가중치가 value를 처음 넘는 위치
            pos = bisect_right(cumulative, value)
            results.append(self.items[min(pos, last)])
        return results

    def draw_cards(self, amount: int = 1) -> list[CardRecord]:
        """뽑은 id를 카드 데이터로 변환 (인덱스에 없는 id는 제외)"""
        if self.index is None:
            raise RuntimeError("인덱스 없이 카드를 만들 수 없습니다 (initialize() 필요)")

        cards = []
        for item in self.draw(amount):
            card = format_card(self.index, item.id)
            if card is not None:
                cards.append(card)
        return cards
