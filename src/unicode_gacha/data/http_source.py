"""HTTP 기반 데이터 소스

정적 파일 서버(예: /data/UnicodeData.txt)에서 텍스트를 내려받습니다.
"""

import asyncio
import logging

import aiohttp

from .text_source import ResourceLoadError, TextSource

logger = logging.getLogger(__name__)


class HttpTextSource(TextSource):
    """base_url 아래의 리소스를 GET으로 가져오는 소스"""

    source_type = "http"

    def __init__(self, base_url: str, timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name.lstrip('/')}"

    async def read_text(self, name: str) -> str:
        url = self.url_for(name)
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url, timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as resp:
                    if resp.status != 200:
                        logger.error(f"다운로드 실패 ({resp.status}): {url}")
                        raise ResourceLoadError(name, f"HTTP {resp.status}")
                    text = await resp.text(encoding="utf-8")
        except aiohttp.ClientError as e:
            logger.error(f"다운로드 오류: {url} - {e}")
            raise ResourceLoadError(name, str(e)) from e
        except asyncio.TimeoutError as e:
            logger.error(f"다운로드 시간 초과: {url}")
            raise ResourceLoadError(name, "timeout") from e
        except UnicodeDecodeError as e:
            logger.error(f"UTF-8 디코딩 실패: {url} - {e}")
            raise ResourceLoadError(name, f"invalid utf-8: {e}") from e
        logger.debug(f"다운로드 완료: {url} ({len(text)}자)")
        return text
