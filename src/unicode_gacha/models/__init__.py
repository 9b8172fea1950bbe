"""데이터 모델"""

from .unicode import BlockRecord, CJKReading, CodePointRecord
from .gacha import CardRecord, PoolItem

__all__ = [
    "CodePointRecord",
    "BlockRecord",
    "CJKReading",
    "PoolItem",
    "CardRecord",
]
