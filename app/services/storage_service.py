"""스토리지 서비스 — S3 presigned URL 또는 로컬 파일 저장.

Storage Service — S3 presigned URL or local file storage.
AWS 키가 비어있으면 자동으로 로컬 모드로 전환됩니다.
게시글/공지/굿즈 서비스는 업로드가 끝난 공개 URL 문자열만 받습니다.
Content services only ever receive the resulting public URL strings.
"""

import uuid
from datetime import datetime, timezone
from pathlib import Path

import boto3
from botocore.config import Config as BotoConfig

from app.config import settings
from app.schemas.media import PresignResponse
from app.utils.exceptions import BadRequestError
from app.utils.messages import MESSAGES
from app.utils.response import ApiResponse, create_response

# 로컬 업로드 디렉토리 - .env의 LOCAL_UPLOADS_DIR 또는 프로젝트 루트의 uploads/
_SERVER_ROOT: Path = Path(__file__).resolve().parent.parent.parent
UPLOADS_DIR: Path = Path(settings.LOCAL_UPLOADS_DIR) if settings.LOCAL_UPLOADS_DIR else _SERVER_ROOT / "uploads"

# 업로드 허용 폴더 (Folders a client may upload into)
ALLOWED_FOLDERS: frozenset[str] = frozenset({"posts", "notices", "profiles", "communities", "merchandise", "media"})


class StorageService:
    """파일 업로드 서비스 — S3 또는 로컬 모드 자동 선택."""

    def __init__(self) -> None:
        self._client = None

    @property
    def is_local(self) -> bool:
        return not settings.AWS_ACCESS_KEY_ID or not settings.AWS_S3_BUCKET

    @property
    def client(self):
        if self.is_local:
            return None
        if self._client is None:
            self._client = boto3.client(
                "s3",
                region_name=settings.AWS_S3_REGION,
                aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
                aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
                config=BotoConfig(signature_version="s3v4"),
            )
        return self._client

    def _generate_key(self, filename: str, folder: str) -> str:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else "bin"
        date_prefix = datetime.now(timezone.utc).strftime("%Y/%m/%d")
        return f"{folder}/{date_prefix}/{uuid.uuid4().hex}.{ext}"

    def presign_upload(
        self,
        filename: str,
        content_type: str,
        folder: str = "posts",
        expires: int = 3600,
    ) -> ApiResponse:
        """presigned PUT URL과 공개 file URL을 발급합니다.

        Issue a presigned PUT URL plus the public URL the file will have.
        In local mode the upload URL points at this server's PUT endpoint.

        Args:
            filename: 원본 파일명, 확장자 추출용 (Original filename, for the extension)
            content_type: 업로드 Content-Type
            folder: 저장 폴더 (One of ALLOWED_FOLDERS)
            expires: URL 유효 시간(초) (URL lifetime in seconds)

        Returns:
            ApiResponse: data = PresignResponse

        Raises:
            BadRequestError: 허용되지 않은 폴더 (Folder not allowed)
        """
        if folder not in ALLOWED_FOLDERS:
            raise BadRequestError(f"허용되지 않은 업로드 폴더입니다: {folder}")

        key = self._generate_key(filename, folder)

        if self.is_local:
            base = settings.PUBLIC_BASE_URL.rstrip("/")
            upload_url = f"{base}{settings.API_PREFIX}/v1/storage/upload/{key}"
            file_url = f"{base}/uploads/{key}"
        else:
            upload_url = self.client.generate_presigned_url(
                "put_object",
                Params={
                    "Bucket": settings.AWS_S3_BUCKET,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires,
            )
            file_url = f"https://{settings.AWS_S3_BUCKET}.s3.{settings.AWS_S3_REGION}.amazonaws.com/{key}"

        return create_response(
            201,
            MESSAGES["STORAGE"]["PRESIGN"]["SUCCEED"],
            PresignResponse(upload_url=upload_url, file_url=file_url, key=key),
        )

    def save_local(self, key: str, data: bytes) -> str:
        """로컬 파일 저장. 저장 경로를 반환합니다.

        Raises:
            BadRequestError: 업로드 디렉토리 밖을 가리키는 키 (Key escapes the uploads dir)
        """
        path = (UPLOADS_DIR / key).resolve()
        if not path.is_relative_to(UPLOADS_DIR.resolve()):
            raise BadRequestError("잘못된 업로드 경로입니다.")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return str(path)


storage_service: StorageService = StorageService()
