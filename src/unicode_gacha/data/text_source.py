"""텍스트 데이터 소스 인터페이스

로컬 파일, HTTP 등 다양한 위치의 데이터 파일을 통일된 인터페이스로 제공
"""

from abc import ABC, abstractmethod


class ResourceLoadError(Exception):
    """리소스 전체를 가져오지 못함 (파일 없음, I/O 오류, 네트워크 오류)"""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


class TextSource(ABC):
    """텍스트 리소스 소스 추상 인터페이스"""

    source_type: str  # 소스 식별자 (local, http), 서브클래스에서 클래스 변수로 정의

    @abstractmethod
    async def read_text(self, name: str) -> str:
        """이름에 해당하는 리소스 전체 텍스트 반환

        Raises:
            ResourceLoadError: 리소스를 가져올 수 없는 경우
        """
        ...
