"""
Glossary Table Store
Read-only access to the terminology tables kept in Airtable.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from urllib.parse import quote

import httpx

from .exceptions import TableFetchError
from .models import GlossaryRecord

logger = logging.getLogger(__name__)


class TableStore(ABC):
    """A key/value table source. Any failure to read a table raises TableFetchError."""

    @abstractmethod
    async def fetch(self, table_name: str) -> List[GlossaryRecord]:
        """Fetch every record of a table."""
        pass


class AirtableTableStore(TableStore):
    """
    Airtable REST client.

    Airtable returns at most 100 records per request and hands back an
    `offset` cursor when there are more; pages are followed up to
    `max_pages`.
    """

    def __init__(
        self,
        api_key: str,
        base_id: str,
        api_url: str = "https://api.airtable.com/v0",
        timeout: float = 10.0,
        max_pages: int = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_id = base_id
        self.api_url = api_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self.max_pages = max_pages
        self._transport = transport

    def table_url(self, table_name: str) -> str:
        return f"{self.api_url}/{self.base_id}/{quote(table_name, safe='')}"

    async def fetch(self, table_name: str) -> List[GlossaryRecord]:
        url = self.table_url(table_name)
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        records: List[GlossaryRecord] = []
        offset: Optional[str] = None

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for page in range(self.max_pages):
                params = {"offset": offset} if offset else None
                try:
                    response = await client.get(url, headers=headers, params=params)
                except httpx.HTTPError as e:
                    raise TableFetchError(table_name, f"request failed: {e}") from e

                if response.status_code != 200:
                    raise TableFetchError(
                        table_name,
                        f"HTTP {response.status_code}",
                        status_code=response.status_code,
                    )

                try:
                    data = response.json()
                except ValueError as e:
                    raise TableFetchError(table_name, "invalid JSON body", status_code=200) from e

                if not isinstance(data, dict):
                    raise TableFetchError(table_name, "unexpected body", status_code=200)
                page_records = data.get("records") or []
                if not isinstance(page_records, list) or not all(isinstance(r, dict) for r in page_records):
                    raise TableFetchError(table_name, "unexpected records payload", status_code=200)

                records.extend(GlossaryRecord.from_api(r) for r in page_records)
                offset = data.get("offset")
                if not offset:
                    break
            else:
                logger.warning(
                    "Table '%s' still has records after %d pages, truncating",
                    table_name, self.max_pages,
                )

        logger.debug("Fetched %d records from table '%s'", len(records), table_name)
        return records
