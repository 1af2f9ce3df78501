# pixshop/database/database.py
import asyncio
import json
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Union
import aiofiles
from pydantic import ValidationError
from ..models.document import StoreDocument

class Database:
    """Single JSON document holding products, PIX settings and orders.

    Every mutation goes through :meth:`transaction`, which serialises
    load → mutate → save behind one lock per document.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)
        self._lock = asyncio.Lock()

    async def connect(self):
        """Create the document with its default shape when missing"""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            await self._write(StoreDocument())
            self.logger.info(f"Created store document at {self.path}")
        else:
            self.logger.info(f"Using store document at {self.path}")

    async def close(self):
        self.logger.info("Store document closed")

    async def load(self) -> StoreDocument:
        """Read the current document, creating it when absent"""
        if not self.path.exists():
            await self.connect()
        return await self._read()

    async def save(self, document: StoreDocument):
        """Overwrite the whole document"""
        async with self._lock:
            await self._write(document)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[StoreDocument]:
        """Yield the document for mutation and save it if the block succeeds"""
        async with self._lock:
            document = await self.load()
            yield document
            await self._write(document)

    async def _read(self) -> StoreDocument:
        async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
            raw = await f.read()
        try:
            return StoreDocument.model_validate_json(raw or "{}")
        except ValidationError as e:
            corrupt = self.path.with_suffix(".corrupt.json")
            self.logger.error(f"Store document is unreadable, moved to {corrupt}: {e}")
            self.path.replace(corrupt)
            document = StoreDocument()
            await self._write(document)
            return document

    async def _write(self, document: StoreDocument):
        data = document.model_dump(mode="json", by_alias=True)
        tmp = self.path.with_suffix(".tmp")
        async with aiofiles.open(tmp, "w", encoding="utf-8") as f:
            await f.write(json.dumps(data, indent=2, ensure_ascii=False))
        os.replace(tmp, self.path)
