# File: billable_hours/auth/google_auth.py
"""
Google API authentication module.
Handles OAuth2 flow and credential management.
"""

from typing import Optional
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import build, Resource
from googleapiclient.errors import HttpError

from billable_hours.models import ReportConfig
from billable_hours.utils.logger import setup_logger

logger = setup_logger(__name__)


def _save_credentials(creds: Credentials, config: ReportConfig) -> None:
    logger.debug(f"Saving credentials to {config.token_path}")
    with open(config.token_path, "w", encoding="utf-8") as token_file:
        token_file.write(creds.to_json())


def _load_credentials(config: ReportConfig) -> Optional[Credentials]:
    """
    Internal helper to load or refresh stored credentials.

    Returns:
        Credentials object or None if no usable token is stored
    """
    creds = None

    if config.token_path.exists():
        logger.debug(f"Loading existing token from {config.token_path}")
        creds = Credentials.from_authorized_user_file(
            str(config.token_path),
            config.scopes
        )

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        logger.info("Refreshing expired credentials")
        try:
            creds.refresh(Request())
            logger.info("Credentials refreshed successfully")
        except Exception as e:
            logger.error(f"Error refreshing token: {e}", exc_info=True)
            logger.warning("Deleting invalid token file")
            config.token_path.unlink(missing_ok=True)
            return None

        _save_credentials(creds, config)
        return creds

    logger.warning("No valid stored credentials found")
    return None


def create_initial_token(config: ReportConfig) -> Optional[Credentials]:
    """
    Run the interactive, browser-based consent flow and persist the token.

    Returns:
        Credentials object, or None if the flow failed

    Raises:
        FileNotFoundError: if the OAuth client file is missing
    """
    logger.info("Starting interactive authentication flow")

    if not config.credentials_path.exists():
        logger.error(f"credentials.json not found at {config.credentials_path}")
        logger.error("Please download it from Google Cloud Console and place it in the project root")
        raise FileNotFoundError(
            f"Missing OAuth client file: {config.credentials_path}"
        )

    try:
        flow = InstalledAppFlow.from_client_secrets_file(
            str(config.credentials_path),
            config.scopes
        )
        logger.info("Opening browser for authentication...")
        creds = flow.run_local_server(port=0)
    except Exception as e:
        logger.error(f"Authentication flow failed: {e}", exc_info=True)
        return None

    _save_credentials(creds, config)
    logger.info(f"Authentication successful! Token saved to {config.token_path}")
    return creds


def authorize(config: ReportConfig, interactive: bool = True) -> Optional[Credentials]:
    """
    Reuse the stored token, or fall back to the consent flow on first run.

    Args:
        config: Report configuration holding scopes and file paths
        interactive: Whether the browser flow may be started

    Returns:
        Credentials object or None if authorization fails
    """
    creds = _load_credentials(config)
    if creds:
        return creds

    if not interactive:
        return None

    return create_initial_token(config)


def get_calendar_service(config: ReportConfig, interactive: bool = True) -> Optional[Resource]:
    """
    Main function to get an authenticated Calendar API resource.

    Returns:
        Calendar API resource, or None if authentication fails
    """
    logger.info("Initializing Google Calendar API service")

    creds = authorize(config, interactive=interactive)

    if not creds:
        logger.error("Authentication failed")
        logger.error("token.json is missing or invalid")
        logger.error("Please run 'python scripts/authorize.py' to authenticate")
        return None

    try:
        logger.debug("Building Calendar API service")
        calendar_service = build("calendar", "v3", credentials=creds)
        logger.info("Calendar API service initialized successfully")
        return calendar_service

    except HttpError as err:
        logger.error(f"HTTP error occurred building service: {err}", exc_info=True)
        return None
