from typing import Any

import boto3

from app.config.settings import Settings


def create_aws_client(service_name: str, settings: Settings) -> Any:
    """Create a boto3 client for service_name from application settings.

    Empty credential fields are left to boto3's default credential chain.
    """
    session = boto3.session.Session(
        aws_access_key_id=settings.aws_access_key or None,
        aws_secret_access_key=settings.aws_secret_key or None,
        aws_session_token=settings.aws_session_token or None,
        region_name=settings.s3_aws_region or None,
    )
    return session.client(service_name)
