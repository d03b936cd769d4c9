"""
Infrastructure: User Export Factory

Dependency injection factory for assembling the user export components.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional

import boto3
from botocore.config import Config
from sqlalchemy import Engine, create_engine

from record_sync.application.user import FindAllUserUseCase, UploadUserUseCase
from record_sync.config import get_config
from record_sync.infrastructure.adapters import LoggerAdapter
from record_sync.infrastructure.user.repositories import (
    PostgresFindUserRepository,
    S3UploadUserRepository,
)
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType


@dataclass
class UserExportUseCases:
    """The user export use cases."""

    find_all: FindAllUserUseCase
    upload: UploadUserUseCase


class UserExportFactory:
    """Factory for creating user export components."""

    @staticmethod
    def create_engine(database_url: str, connect_timeout: int = 10) -> Engine:
        connect_args = {}
        if database_url.startswith("postgresql"):
            connect_args["connect_timeout"] = connect_timeout
        return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)

    @staticmethod
    def create_s3_client(
        endpoint_url: Optional[str] = None,
        connect_timeout: int = 10,
        read_timeout: int = 30,
    ) -> Any:
        return boto3.client(
            "s3",
            endpoint_url=endpoint_url,
            config=Config(connect_timeout=connect_timeout, read_timeout=read_timeout),
        )

    @staticmethod
    def create_use_cases(
        engine: Engine,
        s3_client: Any,
        bucket: str,
        key_prefix: str = "users",
        table_name: str = "user",
        schema: Optional[str] = None,
    ) -> UserExportUseCases:
        """
        Create fully wired user export use cases.

        Args:
            engine: SQLAlchemy engine for the users table
            s3_client: boto3 S3 client
            bucket: Target bucket
            key_prefix: Object key prefix
            table_name: Users table
            schema: Optional schema for the users table

        Returns:
            UserExportUseCases
        """
        find_repository = PostgresFindUserRepository(
            engine=engine, table_name=table_name, schema=schema
        )
        upload_repository = S3UploadUserRepository(
            s3_client=s3_client, bucket=bucket, prefix=key_prefix
        )
        logger = LoggerAdapter(StructuredLogger(ComponentType.USER_EXPORT))

        return UserExportUseCases(
            find_all=FindAllUserUseCase(find_repository, logger),
            upload=UploadUserUseCase(upload_repository, logger),
        )

    @staticmethod
    def create_from_env() -> UserExportUseCases:
        """
        Create use cases from config defaults and environment overrides.

        Environment:
            DATABASE_URL, USER_TABLE, USER_SCHEMA,
            USER_BUCKET, USER_KEY_PREFIX, AWS_ENDPOINT_URL
        """
        config = get_config()["user_export"]

        engine = UserExportFactory.create_engine(
            os.getenv("DATABASE_URL", config["database_url"]),
            connect_timeout=config["connect_timeout_seconds"],
        )
        s3_client = UserExportFactory.create_s3_client(
            endpoint_url=os.getenv("AWS_ENDPOINT_URL"),
            connect_timeout=config["s3_connect_timeout_seconds"],
            read_timeout=config["s3_read_timeout_seconds"],
        )

        return UserExportFactory.create_use_cases(
            engine=engine,
            s3_client=s3_client,
            bucket=os.getenv("USER_BUCKET", config["bucket"]),
            key_prefix=os.getenv("USER_KEY_PREFIX", config["key_prefix"]),
            table_name=os.getenv("USER_TABLE", config["table"]),
            schema=os.getenv("USER_SCHEMA", config["schema"]),
        )
