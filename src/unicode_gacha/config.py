"""가챠 설정"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, model_validator

logger = logging.getLogger(__name__)

# 저장 대상 필드 (사용자가 변경하는 설정만)
_PERSIST_FIELDS = {
    "data_path",
    "source_type",
    "base_url",
    "scan_start",
    "scan_end",
}

CONFIG_FILE = Path("data/config.json")

MAX_CODE_POINT = 0x10FFFF


class GachaConfig(BaseModel):
    """가챠 설정"""

    # 데이터 소스 ("local" 또는 "http")
    source_type: str = "local"
    data_path: Path = Path("data")  # local 소스의 루트
    base_url: str = "http://127.0.0.1:3000/data"  # http 소스의 루트
    http_timeout: float = 60.0

    # 데이터 파일 이름
    unicode_data_file: str = "UnicodeData.txt"
    blocks_file: str = "Blocks.txt"
    cjk_readings_file: str = "Unihan/Unihan_Readings.txt"

    # 로드할 코드 포인트 범위 (기본: BMP 전체)
    scan_start: int = 0x0000
    scan_end: int = 0xFFFF

    log_dir: Path = Path("logs")

    @model_validator(mode="after")
    def _check_scan_range(self) -> "GachaConfig":
        if not 0 <= self.scan_start <= self.scan_end <= MAX_CODE_POINT:
            raise ValueError(
                f"잘못된 코드 포인트 범위: {self.scan_start:#x}..{self.scan_end:#x}"
            )
        return self

    def save(self, path: Path | None = None) -> None:
        """설정을 JSON 파일로 저장"""
        path = path or CONFIG_FILE
        try:
            data = self.model_dump(mode="json", include=_PERSIST_FIELDS)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except Exception as e:
            logger.warning(f"설정 저장 실패: {e}")

    def load(self, path: Path | None = None) -> None:
        """JSON 파일에서 설정 로드 (실패 시 현재 값 유지)"""
        path = path or CONFIG_FILE
        if not path.exists():
            return
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            persisted = {k: v for k, v in data.items() if k in _PERSIST_FIELDS}
            loaded = self.model_validate({**self.model_dump(), **persisted})
            for key in persisted:
                setattr(self, key, getattr(loaded, key))
            logger.info(f"설정 로드: source={self.source_type}, range={self.scan_start:#x}..{self.scan_end:#x}")
        except Exception as e:
            logger.warning(f"설정 로드 실패: {e}")


# 전역 설정 인스턴스
config = GachaConfig()
config.load()
