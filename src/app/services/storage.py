"""
Markdown 파일 저장소 (Azure Blob Storage 래퍼).

4개 기본 연산만 제공:
- upload / download / delete / list

규칙:
- 실패 시 호출자가 넘긴 logger로 기록 후 원래 예외 그대로 재발생
- 블로킹 SDK 호출은 asyncio.to_thread로 실행
"""

import asyncio
import logging
import re

from azure.storage.blob import BlobServiceClient, ContainerClient, ContentSettings

from src.core.ids import IdSource, default_id_source
from src.domain.constants import MARKDOWN_CONTENT_TYPE, STORAGE_FILE_TYPES
from src.domain.schemas import StoredObject

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


class MarkdownStorage:
    """
    Markdown 문서용 오브젝트 스토리지 접근.

    Usage:
        storage = MarkdownStorage.from_connection_string(conn, "specifications", logger)
        path = await storage.upload_markdown_file("specs/1_a.md", "# Title")
    """

    def __init__(self, container_client: ContainerClient, logger: logging.Logger) -> None:
        self.container_client = container_client
        self.logger = logger

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str,
        container: str,
        logger: logging.Logger,
    ) -> "MarkdownStorage":
        """연결 문자열로 생성."""
        service = BlobServiceClient.from_connection_string(connection_string)
        return cls(service.get_container_client(container), logger)

    async def upload_markdown_file(
        self,
        path: str,
        content: str,
        metadata: dict[str, str] | None = None,
    ) -> str:
        """
        Markdown 업로드 (덮어쓰기).

        Args:
            path: 저장 경로
            content: 본문 텍스트
            metadata: 오브젝트 메타데이터

        Returns:
            저장된 경로
        """
        try:
            await asyncio.to_thread(
                self.container_client.upload_blob,
                name=path,
                data=content.encode("utf-8"),
                overwrite=True,
                content_settings=ContentSettings(content_type=MARKDOWN_CONTENT_TYPE),
                metadata=metadata,
            )
            return path
        except Exception as e:
            self.logger.error(f"Error uploading file {path}: {e}")
            raise

    async def download_markdown_file(self, path: str) -> str:
        """Markdown 다운로드 → UTF-8 텍스트."""
        try:
            downloader = await asyncio.to_thread(self.container_client.download_blob, path)
            data: bytes = await asyncio.to_thread(downloader.readall)
            return data.decode("utf-8")
        except Exception as e:
            self.logger.error(f"Error downloading file {path}: {e}")
            raise

    async def delete_file(self, path: str) -> None:
        """오브젝트 삭제."""
        try:
            await asyncio.to_thread(self.container_client.delete_blob, path)
        except Exception as e:
            self.logger.error(f"Error deleting file {path}: {e}")
            raise

    async def list_files(self, prefix: str) -> list[StoredObject]:
        """
        prefix 하위 오브젝트 목록.

        Returns:
            StoredObject 목록 (SDK 반환 순서)
        """
        try:
            blobs = await asyncio.to_thread(
                lambda: list(self.container_client.list_blobs(name_starts_with=prefix))
            )
        except Exception as e:
            self.logger.error(f"Error listing files under {prefix!r}: {e}")
            raise

        return [
            StoredObject(
                path=blob.name,
                size=blob.size,
                last_modified=blob.last_modified.isoformat() if blob.last_modified else None,
                etag=blob.etag,
            )
            for blob in blobs
        ]


def sanitize_filename(filename: str) -> str:
    """[A-Za-z0-9.-] 외 문자 → 밑줄."""
    return _UNSAFE_FILENAME_CHARS.sub("_", filename)


def generate_file_path(
    file_type: str,
    filename: str,
    ids: IdSource | None = None,
) -> str:
    """
    고유 저장 경로 생성.

    포맷: {type}/{timestamp}_{sanitized filename}

    Args:
        file_type: "specs" 또는 "tickets"
        filename: 원본 파일명
        ids: 타임스탬프 소스

    Raises:
        ValueError: 알 수 없는 file_type
    """
    if file_type not in STORAGE_FILE_TYPES:
        raise ValueError(f"Unknown file type: {file_type!r} (expected one of {STORAGE_FILE_TYPES})")

    ids = ids or default_id_source()
    return f"{file_type}/{ids.next_timestamp()}_{sanitize_filename(filename)}"
