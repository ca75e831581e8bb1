"""Firestore client construction from application settings."""

import logging

from google.cloud import firestore
from google.oauth2 import service_account

from noticias.config import Settings

logger = logging.getLogger(__name__)


def create_firestore_client(settings: Settings) -> firestore.AsyncClient:
    """Build the process-wide Firestore AsyncClient.

    Uses the service account file from ``firestore_credentials_file`` when
    set, otherwise Application Default Credentials.
    """
    credentials = None
    project = settings.firestore_project_id or None

    if settings.firestore_credentials_file:
        credentials = service_account.Credentials.from_service_account_file(
            settings.firestore_credentials_file
        )
        project = project or credentials.project_id

    logger.info(
        "Connecting to Firestore (project=%s, database=%s)",
        project or "<default>",
        settings.firestore_database,
    )
    return firestore.AsyncClient(
        project=project,
        credentials=credentials,
        database=settings.firestore_database,
    )
