"""Google Sheets store."""
import asyncio
import logging
from typing import Any, List

import httplib2
from google.oauth2 import service_account
from google_auth_httplib2 import AuthorizedHttp
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.services.ordering.errors import StorageFailure
from app.services.sheets.base import SheetStore

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class GoogleSheetStore(SheetStore):
    """Sheet store backed by the Google Sheets v4 API."""

    def __init__(self, spreadsheet_id: str, credentials: Any):
        self.spreadsheet_id = spreadsheet_id
        self.credentials = credentials
        self.service = build("sheets", "v4", credentials=credentials, cache_discovery=False)

    @classmethod
    def from_service_account_file(cls, spreadsheet_id: str, path: str) -> "GoogleSheetStore":
        """Create a store authenticated with a service account key file."""
        credentials = service_account.Credentials.from_service_account_file(
            path, scopes=SHEETS_SCOPES
        )
        return cls(spreadsheet_id, credentials)

    def _http(self) -> AuthorizedHttp:
        # httplib2 is not thread-safe, so each call gets its own transport
        return AuthorizedHttp(self.credentials, http=httplib2.Http())

    def _append(self, range_name: str, rows: List[List[Any]]) -> dict:
        request = self.service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
            valueInputOption="USER_ENTERED",
            body={"values": rows},
        )
        return request.execute(http=self._http())

    def _get(self, range_name: str) -> dict:
        request = self.service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id,
            range=range_name,
        )
        return request.execute(http=self._http())

    async def append_rows(self, range_name: str, rows: List[List[Any]]) -> None:
        logger.info(f"[SHEETS] Appending {len(rows)} rows to {range_name}")
        try:
            result = await asyncio.to_thread(self._append, range_name, rows)
        except HttpError as e:
            raise StorageFailure(f"Failed to append rows: {e.reason}") from e
        except Exception as e:
            raise StorageFailure(f"Failed to append rows: {str(e)}") from e
        updated = result.get("updates", {}).get("updatedRange", "")
        logger.debug(f"[SHEETS] Append complete - updated range: {updated}")

    async def read_rows(self, range_name: str) -> List[List[Any]]:
        logger.info(f"[SHEETS] Reading rows from {range_name}")
        try:
            result = await asyncio.to_thread(self._get, range_name)
        except HttpError as e:
            raise StorageFailure(f"Failed to read rows: {e.reason}") from e
        except Exception as e:
            raise StorageFailure(f"Failed to read rows: {str(e)}") from e
        return result.get("values", [])
