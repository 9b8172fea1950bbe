"""가중치 뽑기 모듈"""

from .card import DEFAULT_BLOCK_COLOR, format_card, format_code_label
from .pool import Pool, uniform_code_points, weighted_by_block

__all__ = [
    "Pool",
    "DEFAULT_BLOCK_COLOR",
    "format_card",
    "format_code_label",
    "uniform_code_points",
    "weighted_by_block",
]
