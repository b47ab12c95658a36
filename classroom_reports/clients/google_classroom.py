"""Builds the Google Classroom v1 discovery resource used by the accessor."""

import logging

import google.auth
from google.oauth2 import service_account
from googleapiclient.discovery import build

from classroom_reports.core.config import SCOPES, Settings

logger = logging.getLogger(__name__)


def get_credentials(settings: Settings):
    if settings.google_credentials_file:
        creds = service_account.Credentials.from_service_account_file(
            str(settings.google_credentials_file), scopes=SCOPES
        )
        if settings.google_delegated_user:
            creds = creds.with_subject(settings.google_delegated_user)
        logger.info("Using service account credentials from %s", settings.google_credentials_file)
        return creds

    creds, project = google.auth.default(scopes=SCOPES)
    logger.info("Using application default credentials (project=%s)", project)
    return creds


def build_classroom_service(settings: Settings):
    return build(
        "classroom",
        "v1",
        credentials=get_credentials(settings),
        cache_discovery=False,
    )
