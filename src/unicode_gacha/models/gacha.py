"""뽑기 관련 모델"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PoolItem:
    """풀 항목"""

    id: int
    weight: float = 1


@dataclass
class CardRecord:
    """카드 표시용 데이터 (저장하지 않는 파생 뷰)"""

    id: int
    name: str
    description: str
    char: str
    block_name: str = ""
    block_color: str = "#ffffff"

    @property
    def label(self) -> str:
        """U+XXXX 표기"""
        return f"U+{self.id:04X}"
