# =============================================================================
# lib/sheets_client.py - Google Sheets Client Wrapper
# =============================================================================
# This module provides a typed wrapper for the Google Sheets v4 values API.
# The spreadsheet is the only persistent store of the service:
# - Faculty roster rows (Name, Department, Subject, Mobile)
# - Review rows (Name, 6 ratings, Timestamp)
#
# Every remote call gets its own authorized HTTP object with an explicit
# socket timeout, so the wrapper can be shared across worker threads.
#
# Usage:
#   from lib.sheets_client import SheetsClient
#   client = SheetsClient(spreadsheet_id, credentials_file="key.json")
#   rows = client.read_range("Faculty", "A2:D")
# =============================================================================

from __future__ import annotations

import logging
import socket
from typing import Any

import google_auth_httplib2
import httplib2
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

# Set up logging for this module
logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class SheetsClientError(Exception):
    """
    Error during Google Sheets operations.

    Provides actionable error messages: "Errors should tell HOW to fix,
    not just WHAT failed."

    `retryable` marks failures (timeouts, 5xx, rate limits) that may succeed
    on a later request. The service itself never retries.
    """

    def __init__(
        self,
        message: str,
        code: str = "SHEETS_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        self.retryable = retryable

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def a1_range(sheet_name: str, cells: str) -> str:
    """
    Build an A1 range for a sheet.

    The sheet name is always quoted so names with spaces or punctuation
    work; embedded single quotes are doubled.

    Example:
        a1_range("Faculty", "A2:D")       # "'Faculty'!A2:D"
        a1_range("Bob's Sheet", "A2:A")   # "'Bob''s Sheet'!A2:A"
    """
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'!{cells}"


class SheetsClient:
    """
    Typed wrapper for Google Sheets operations.

    The discovery service object is created lazily on first use, so
    constructing a client never touches the credentials file.

    Example:
        client = SheetsClient("1AbC...", credentials_file="google-sheets-key.json")
        client.append_row("Reviews", "A2:I", ["Dr. Rao", 4, 5, 4, 4, 7.5, 4, "..."])
    """

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_file: str = "google-sheets-key.json",
        timeout_seconds: float = 10.0,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_file = credentials_file
        self.timeout_seconds = timeout_seconds
        self._credentials = None
        self._service = None

    # -------------------------------------------------------------------------
    # Connection
    # -------------------------------------------------------------------------

    def _get_credentials(self):
        if self._credentials is None:
            try:
                self._credentials = service_account.Credentials.from_service_account_file(
                    self.credentials_file,
                    scopes=SHEETS_SCOPES,
                )
            except Exception as e:
                raise SheetsClientError(
                    message=f"Failed to load Google credentials: {e}",
                    code="CREDENTIALS_INVALID",
                    suggestion="Check GOOGLE_CREDENTIALS_FILE points to a service account JSON key",
                    details={"credentials_file": self.credentials_file},
                )
        return self._credentials

    def _get_service(self):
        """
        Get or create the Sheets discovery service.

        Returns:
            googleapiclient Resource for the sheets v4 API

        Raises:
            SheetsClientError: If credentials or discovery fail
        """
        if self._service is None:
            credentials = self._get_credentials()
            try:
                self._service = build(
                    "sheets",
                    "v4",
                    credentials=credentials,
                    cache_discovery=False,
                )
                logger.info("Google Sheets client initialized successfully")
            except Exception as e:
                raise SheetsClientError(
                    message=f"Failed to create Google Sheets client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check network access to googleapis.com",
                )
        return self._service

    def _authorized_http(self) -> google_auth_httplib2.AuthorizedHttp:
        # httplib2.Http is not thread-safe, one per call
        return google_auth_httplib2.AuthorizedHttp(
            self._get_credentials(),
            http=httplib2.Http(timeout=self.timeout_seconds),
        )

    def _execute(self, request, operation: str, details: dict[str, Any]) -> dict[str, Any]:
        """Execute a prepared API request, translating failures."""
        try:
            return request.execute(http=self._authorized_http(), num_retries=0)

        except HttpError as e:
            status = getattr(e.resp, "status", None)
            raise SheetsClientError(
                message=f"Failed to {operation}: {e}",
                code="SHEETS_HTTP_ERROR",
                suggestion="Check SPREADSHEET_ID, the sheet name, and that the service account has access",
                details={**details, "status": status},
                retryable=status in (429, 500, 502, 503, 504),
            )
        except (socket.timeout, TimeoutError) as e:
            raise SheetsClientError(
                message=f"Timed out trying to {operation} after {self.timeout_seconds}s",
                code="SHEETS_TIMEOUT",
                suggestion="Try again later; raise SHEETS_TIMEOUT_SECONDS if this persists",
                details={**details, "error": str(e)},
                retryable=True,
            )
        except SheetsClientError:
            raise
        except Exception as e:
            raise SheetsClientError(
                message=f"Failed to {operation}: {e}",
                code="SHEETS_REQUEST_FAILED",
                details=details,
            )

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def read_range(self, sheet_name: str, cells: str) -> list[list[str]]:
        """
        Read a rectangular range of values.

        Args:
            sheet_name: Name of the sheet (tab) to read
            cells: A1 cell range without the sheet prefix, e.g. "A2:D"

        Returns:
            Rows in sheet order. Trailing empty cells are omitted by the
            API, so rows may be shorter than the range width. An empty
            range returns [].

        Raises:
            SheetsClientError: If the sheet does not exist or the call fails
        """
        range_name = a1_range(sheet_name, cells)
        service = self._get_service()
        request = service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
        )

        response = self._execute(request, "read range", {"range": range_name})
        rows = response.get("values", [])

        logger.debug(f"Read {len(rows)} rows from {range_name}")
        return [[str(cell) for cell in row] for row in rows]

    def append_row(
        self,
        sheet_name: str,
        cells: str,
        row: list[str | int | float],
    ) -> dict[str, Any]:
        """
        Append a single row after the last row of a range.

        Values are written with USER_ENTERED so numbers stay numeric in
        the sheet, and INSERT_ROWS so existing data is never overwritten.

        Returns:
            The API's update summary (updatedRange, updatedRows, ...)

        Raises:
            SheetsClientError: If the append fails
        """
        range_name = a1_range(sheet_name, cells)
        service = self._get_service()
        request = service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
            valueInputOption="USER_ENTERED",
            insertDataOption="INSERT_ROWS",
            body={"values": [row]},
        )

        response = self._execute(request, "append row", {"range": range_name})

        logger.info(f"Appended row to {range_name}")
        return response.get("updates", {})

    # -------------------------------------------------------------------------
    # Metadata
    # -------------------------------------------------------------------------

    def get_spreadsheet_metadata(self) -> dict[str, Any]:
        """
        Fetch spreadsheet title and sheet names.

        Used as the reachability probe of the health endpoint.
        """
        service = self._get_service()
        request = service.spreadsheets().get(
            spreadsheetId=self.spreadsheet_id,
            fields="properties.title,sheets.properties.title",
        )

        response = self._execute(
            request,
            "fetch spreadsheet metadata",
            {"spreadsheet_id": self.spreadsheet_id},
        )

        return {
            "title": response.get("properties", {}).get("title", ""),
            "sheets": [
                sheet.get("properties", {}).get("title", "")
                for sheet in response.get("sheets", [])
            ],
        }
