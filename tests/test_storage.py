"""
Tests for the S3 upload service using botocore's Stubber.
"""
import io

import boto3
import pytest
from botocore.stub import ANY, Stubber
from fastapi import UploadFile
from starlette.datastructures import Headers

from board_api.exceptions import FileTooLargeError, StorageUploadError
from board_api.services.storage import S3UploadService

BUCKET = "board-images"


@pytest.fixture
def s3_client():
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def make_upload(content=b"fake-image", filename="Photo.PNG", content_type="image/png"):
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def test_upload_puts_object_and_returns_url(s3_client):
    service = S3UploadService(BUCKET, s3_client, region="us-east-1")

    with Stubber(s3_client) as stubber:
        stubber.add_response(
            "put_object",
            {},
            {"Bucket": BUCKET, "Key": ANY, "Body": b"fake-image", "ContentType": "image/png"},
        )
        url = service.upload(make_upload(), "board")
        stubber.assert_no_pending_responses()

    assert url.startswith(f"https://{BUCKET}.s3.us-east-1.amazonaws.com/board/")
    assert url.endswith(".png")


def test_upload_uses_public_base_url(s3_client):
    service = S3UploadService(BUCKET, s3_client, public_base_url="https://cdn.example.com/")

    with Stubber(s3_client) as stubber:
        stubber.add_response("put_object", {}, None)
        url = service.upload(make_upload(filename="x.jpg", content_type="image/jpeg"), "board")

    assert url.startswith("https://cdn.example.com/board/")
    assert url.endswith(".jpg")


def test_upload_client_error_propagates(s3_client):
    service = S3UploadService(BUCKET, s3_client, region="us-east-1")

    with Stubber(s3_client) as stubber:
        stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
        with pytest.raises(StorageUploadError):
            service.upload(make_upload(), "board")


def test_upload_rejects_oversized_file(s3_client):
    service = S3UploadService(BUCKET, s3_client, max_size_mb=1)

    with Stubber(s3_client) as stubber:
        with pytest.raises(FileTooLargeError):
            service.upload(make_upload(content=b"0" * (1024 * 1024 + 1)), "board")
        stubber.assert_no_pending_responses()


def test_oversized_stream_is_not_fully_read(s3_client):
    service = S3UploadService(BUCKET, s3_client, max_size_mb=1)
    stream = io.BytesIO(b"0" * (50 * 1024 * 1024))
    upload = UploadFile(file=stream, filename="huge.png")

    with pytest.raises(FileTooLargeError):
        service.upload(upload, "board")

    assert stream.tell() == 1024 * 1024 + 1


def test_file_at_limit_is_accepted(s3_client):
    service = S3UploadService(BUCKET, s3_client, region="us-east-1", max_size_mb=1)
    content = b"0" * (1024 * 1024)

    with Stubber(s3_client) as stubber:
        stubber.add_response(
            "put_object",
            {},
            {"Bucket": BUCKET, "Key": ANY, "Body": content, "ContentType": "image/png"},
        )
        service.upload(make_upload(content=content), "board")
        stubber.assert_no_pending_responses()


def test_keys_are_unique_per_upload(s3_client):
    service = S3UploadService(BUCKET, s3_client, region="us-east-1")

    with Stubber(s3_client) as stubber:
        stubber.add_response("put_object", {}, None)
        stubber.add_response("put_object", {}, None)
        first = service.upload(make_upload(), "board")
        second = service.upload(make_upload(), "board")

    assert first != second
