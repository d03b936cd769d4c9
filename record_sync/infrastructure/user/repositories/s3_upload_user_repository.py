"""
Infrastructure: S3 Upload User Repository

Concrete implementation of IUploadUserRepository writing one JSON object
per user with boto3.
"""

import json
import uuid
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from record_sync.domain.exceptions import RequestError
from record_sync.domain.user.entities import User
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType, MessageDirection


class S3UploadUserRepository:
    """
    Writes each user to s3://{bucket}/{prefix}/user-{id}.json.

    Existing objects at the same key are overwritten.
    """

    CONTENT_TYPE = "application/json"

    def __init__(self, s3_client: Any, bucket: str, prefix: str = "users"):
        """
        Args:
            s3_client: boto3 S3 client
            bucket: Target bucket
            prefix: Key prefix; trailing slashes are ignored
        """
        self.s3_client = s3_client
        self.bucket = bucket
        self.prefix = prefix.rstrip("/")
        self.logger = StructuredLogger(ComponentType.USER_EXPORT)

    def object_key(self, user: User) -> str:
        filename = f"user-{user.id}.json"
        if not self.prefix:
            return filename
        return f"{self.prefix}/{filename}"

    def upload(self, user: User) -> None:
        key = self.object_key(user)
        body = json.dumps(user.to_dict(), indent=2)
        trace_id = str(uuid.uuid4())

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.REQUEST,
            operation="user_upload",
            payload=user.to_dict(),
            target={"bucket": self.bucket, "key": key},
        )

        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=body.encode("utf-8"),
                ContentType=self.CONTENT_TYPE,
            )
        except (BotoCoreError, ClientError) as e:
            self.logger.logger.error(f"Upload of s3://{self.bucket}/{key} failed: {e}")
            raise RequestError(str(e)) from e

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.RESPONSE,
            operation="user_upload",
            payload={},
            target={"bucket": self.bucket, "key": key},
        )
