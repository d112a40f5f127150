import os
import uuid
from functools import lru_cache
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi import UploadFile

from ..config import get_settings
from ..exceptions import FileTooLargeError, StorageUploadError
from ..logging_config import storage_logger


class S3UploadService:
    def __init__(
        self,
        bucket_name: str,
        client,
        region: Optional[str] = None,
        public_base_url: Optional[str] = None,
        max_size_mb: int = 10,
    ):
        """
        Initialize the upload service with a bucket and a boto3 S3 client
        """
        self.bucket_name = bucket_name
        self.s3 = client
        self.region = region
        self.public_base_url = public_base_url.rstrip("/") if public_base_url else None
        self.max_size_mb = max_size_mb

    def upload(self, file: UploadFile, dirname: str) -> str:
        """
        Upload a file under the given namespace

        Args:
            file: The uploaded file
            dirname: Key prefix, e.g. "board"

        Returns:
            The public URL of the stored object

        Raises:
            FileTooLargeError: If the file exceeds the configured limit
            StorageUploadError: If the object store rejects the upload
        """
        extension = os.path.splitext(file.filename or "")[1].lower()
        key = f"{dirname}/{uuid.uuid4()}{extension}"

        # Never buffer more than one byte past the limit
        max_bytes = self.max_size_mb * 1024 * 1024
        file_content = file.file.read(max_bytes + 1)
        if len(file_content) > max_bytes:
            raise FileTooLargeError(self.max_size_mb)

        try:
            self.s3.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=file_content,
                ContentType=file.content_type or "application/octet-stream",
            )
        except (BotoCoreError, ClientError) as e:
            storage_logger.error("S3 upload failed", error=e, bucket=self.bucket_name, key=key)
            raise StorageUploadError() from e

        storage_logger.info("Uploaded file", bucket=self.bucket_name, key=key, size=len(file_content))
        return self.url_for(key)

    def url_for(self, key: str) -> str:
        if self.public_base_url:
            return f"{self.public_base_url}/{key}"
        if self.region:
            return f"https://{self.bucket_name}.s3.{self.region}.amazonaws.com/{key}"
        return f"https://{self.bucket_name}.s3.amazonaws.com/{key}"


@lru_cache()
def get_upload_service() -> S3UploadService:
    """Build the process-wide upload service from settings."""
    settings = get_settings()
    client = boto3.client(
        "s3",
        region_name=settings.s3_region,
        endpoint_url=settings.s3_endpoint_url,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        config=Config(signature_version="s3v4"),
    )
    return S3UploadService(
        settings.s3_bucket,
        client,
        region=settings.s3_region,
        public_base_url=settings.s3_public_base_url,
        max_size_mb=settings.max_upload_mb,
    )
