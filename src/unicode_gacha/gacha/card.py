"""카드 표시 데이터 구성"""

from typing import TYPE_CHECKING

from ..models.gacha import CardRecord

if TYPE_CHECKING:
    from ..unicode.index import UnicodeIndex

DEFAULT_BLOCK_COLOR = "#ffffff"
UNKNOWN_BLOCK = "Unknown"


def format_code_label(code_point: int) -> str:
    """U+0041 형식"""
    return f"U+{code_point:04X}"


def format_card(index: "UnicodeIndex", id: int) -> CardRecord | None:
    """인덱스에서 카드 데이터를 구성 (모르는 코드 포인트면 None)

    설명은 여러 줄:
        Name: <이름>
        Block: <블록 이름 또는 Unknown>
        <읽기 태그>: <텍스트>   (CJK 읽기마다 한 줄)
    """
    record = index.get_code_point(id)
    if record is None:
        return None

    block = index.get_block(id)
    lines = [
        f"Name: {record.name}",
        f"Block: {block.name if block else UNKNOWN_BLOCK}",
    ]
    lines.extend(f"{r.label}: {r.text}" for r in index.get_cjk_reading(id))

    return CardRecord(
        id=id,
        name=record.name,
        description="\n".join(lines),
        char=chr(id),
        block_name=block.name if block else "",
        block_color=block.color if block else DEFAULT_BLOCK_COLOR,
    )
