"""유니코드 레코드 모델"""

from dataclasses import dataclass, field, fields, replace


@dataclass(frozen=True)
class CodePointRecord:
    """UnicodeData.txt의 한 줄 (코드 포인트 속성)"""

    id: int  # 0 ~ 0x10FFFF
    name: str
    general_category: str = ""
    canonical_combining_class: str = ""
    bidi_class: str = ""
    decomposition_type: str = ""
    decomposition_mapping: str = ""
    numeric_type: str = ""
    numeric_value: str = ""
    bidi_mirrored: str = ""
    unicode_1_name: str = ""
    iso_comment: str = ""
    simple_uppercase_mapping: str = ""
    simple_lowercase_mapping: str = ""
    simple_titlecase_mapping: str = ""
    # 파일에 적힌 코드 포인트 문자열 (합성 레코드는 빈 문자열)
    code: str = field(default="", compare=False, repr=False)

    def to_fields(self) -> list[str]:
        """파일과 같은 순서의 15개 필드"""
        values = [getattr(self, f.name) for f in fields(self)[1:15]]
        return [self.code or f"{self.id:04X}", *values]

    def to_line(self) -> str:
        return ";".join(self.to_fields())

    def replace_id(self, id: int, name: str) -> "CodePointRecord":
        """범위 확장용 복사본 (id, name만 교체)"""
        return replace(self, id=id, name=name, code="")


@dataclass(frozen=True)
class BlockRecord:
    """Blocks.txt의 블록 범위"""

    id: int  # 파일 순서대로 부여
    start: int
    end: int  # 포함
    name: str
    color: str  # "#rrggbb"

    def contains(self, code_point: int) -> bool:
        return self.start <= code_point <= self.end


@dataclass(frozen=True)
class CJKReading:
    """Unihan 읽기 항목 (필드 태그 + 텍스트)"""

    field: str  # kMandarin, kHangul 등
    text: str

    @property
    def label(self) -> str:
        """앞의 표식 문자를 뗀 태그 (kMandarin -> Mandarin)"""
        return self.field[1:]
