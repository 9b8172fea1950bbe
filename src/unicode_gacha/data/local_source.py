"""로컬 파일 시스템 기반 데이터 소스"""

import asyncio
import logging
from pathlib import Path

from .text_source import ResourceLoadError, TextSource

logger = logging.getLogger(__name__)


class LocalTextSource(TextSource):
    """data 폴더 아래의 텍스트 파일을 읽는 소스"""

    source_type = "local"

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def resolve(self, name: str) -> Path:
        return self.root / name

    async def read_text(self, name: str) -> str:
        path = self.resolve(name)
        try:
            # 파일 읽기는 이벤트 루프 밖에서
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            logger.error(f"파일 읽기 실패: {path} - {e}")
            raise ResourceLoadError(name, str(e)) from e
        except UnicodeDecodeError as e:
            logger.error(f"UTF-8 디코딩 실패: {path} - {e}")
            raise ResourceLoadError(name, f"invalid utf-8: {e}") from e
        logger.debug(f"파일 로드: {path} ({len(text)}자)")
        return text
