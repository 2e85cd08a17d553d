"""
Table Resolver
Find the terminology table for a target language.
"""
import logging
from typing import List, Optional

from .config import GlossaryConfig, DEFAULT_GLOSSARY_CONFIG
from .exceptions import GlossaryUnavailable, TableFetchError
from .models import ResolvedTable
from .table_store import TableStore

logger = logging.getLogger(__name__)


class TableResolver:
    """
    Try each candidate table name for a language until one can be fetched.

    Candidates are fetched one at a time in configured order. The first
    successful fetch wins, even when the table is empty.
    """

    def __init__(self, store: TableStore, config: Optional[GlossaryConfig] = None):
        self.store = store
        self.config = config or DEFAULT_GLOSSARY_CONFIG

    def candidates(self, target_language: str) -> List[str]:
        return self.config.table_candidates(target_language)

    async def resolve(self, target_language: str) -> ResolvedTable:
        """
        Fetch the first reachable candidate table.

        Raises:
            GlossaryUnavailable: every candidate failed
        """
        tried: List[str] = []
        for table_name in self.candidates(target_language):
            tried.append(table_name)
            logger.debug("Trying glossary table '%s'", table_name)
            try:
                records = await self.store.fetch(table_name)
            except TableFetchError as e:
                logger.debug("Glossary table '%s' not available: %s", table_name, e)
                continue

            logger.info(
                "Glossary table '%s' found with %d records", table_name, len(records),
                extra={
                    "event": "table_chosen",
                    "language": target_language,
                    "table": table_name,
                    "records": len(records),
                },
            )
            return ResolvedTable(name=table_name, records=records, tried=tried)

        raise GlossaryUnavailable(target_language, tried)
