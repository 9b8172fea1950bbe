"""텍스트 데이터 소스 모듈"""

from pathlib import Path

from .text_source import ResourceLoadError, TextSource

__all__ = [
    "TextSource",
    "ResourceLoadError",
    "create_text_source",
    "source_from_config",
]


def create_text_source(
    source_type: str,
    data_root: str | Path = "data",
    **kwargs,
) -> TextSource:
    """설정에 따라 적절한 데이터 소스 인스턴스 생성"""
    if source_type == "http":
        from .http_source import HttpTextSource

        base_url = kwargs.get("base_url")
        if not base_url:
            raise ValueError("http 소스에는 base_url이 필요합니다")
        return HttpTextSource(base_url, timeout=kwargs.get("timeout", 60.0))
    elif source_type == "local":
        from .local_source import LocalTextSource

        return LocalTextSource(data_root)
    raise ValueError(f"Unsupported source type: {source_type}")


def source_from_config(config=None) -> TextSource:
    """GachaConfig에서 데이터 소스 생성 (None이면 전역 config 사용)"""
    if config is None:
        from ..config import config

    return create_text_source(
        config.source_type,
        config.data_path,
        base_url=config.base_url,
        timeout=config.http_timeout,
    )
