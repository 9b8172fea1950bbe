"""공유 인덱스 인스턴스 관리

여러 풀에서 같은 인덱스를 쓰기 위한 선택적 싱글톤.
풀에는 여전히 인덱스를 명시적으로 넘긴다.
"""

import asyncio

from .unicode import UnicodeIndex, init_unicode_index

_unicode_index: UnicodeIndex | None = None
_lock: asyncio.Lock | None = None


async def get_unicode_index() -> UnicodeIndex:
    """설정 기준으로 로드된 인덱스 반환 (최초 호출 시 로드)"""
    global _unicode_index, _lock
    if _unicode_index is not None:
        return _unicode_index

    if _lock is None:
        _lock = asyncio.Lock()
    async with _lock:
        if _unicode_index is None:
            _unicode_index = await init_unicode_index()
    return _unicode_index


def reset_unicode_index() -> None:
    """인덱스 인스턴스 리셋 (다음 호출 시 다시 로드)"""
    global _unicode_index, _lock
    _unicode_index = None
    _lock = None
