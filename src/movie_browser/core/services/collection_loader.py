"""Collection loader service implementation."""

import asyncio
from itertools import chain
from pathlib import Path
from typing import Any, List, Optional

import aiofiles
import aiohttp

from ...config.models import Config
from ...infrastructure.logging import LoggerMixin
from ...utils import SourceUnavailableError, resolve_path
from ..interfaces import ICollectionLoader, IRecordParser
from ..models import MovieCollection, SourceLoadResult
from .facet_extractor import extract_genres


def is_url(location: str) -> bool:
    """Check if a source location is an http(s) URL."""
    return location.lower().startswith(("http://", "https://"))


class CollectionLoader(ICollectionLoader, LoggerMixin):
    """Loads every configured source concurrently and merges the results.

    Sources are fetched in parallel and the merge only happens once all of
    them have finished. Records keep the declared source order regardless of
    which fetch completes first.
    """

    def __init__(self, config: Config, record_parser: IRecordParser) -> None:
        """Initialize collection loader.

        Args:
            config: Application configuration.
            record_parser: Parser used for every source document.
        """
        self._config = config
        self._collection_config = config.collection
        self._record_parser = record_parser
        self._session: Optional[aiohttp.ClientSession] = None

    async def load(self) -> MovieCollection:
        """Retrieve and parse every configured source concurrently.

        Returns:
            Unified collection. Unavailable sources contribute no records.
        """
        sources = self._collection_config.sources
        locations = [self.resolve_location(source.location) for source in sources]
        self.logger.info(f"Loading {len(sources)} sources")

        tasks = [
            self.load_source(location, source.tag) for location, source in zip(locations, sources)
        ]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        source_results: List[SourceLoadResult] = []
        for i, result in enumerate(results):
            if isinstance(result, Exception):
                self.logger.error(f"Failed to load {sources[i].tag}: {result}")
                source_results.append(
                    SourceLoadResult(tag=sources[i].tag, location=locations[i], error=str(result))
                )
            else:
                source_results.append(result)

        records = tuple(chain.from_iterable(result.records for result in source_results))
        collection = MovieCollection(
            records=records,
            genres=tuple(extract_genres(records)),
            sources=tuple(source_results),
            ready=True,
        )

        self.logger.info(
            f"Total: {len(records)} movies loaded from "
            f"{len(sources) - len(collection.failed_sources)}/{len(sources)} sources"
        )
        return collection

    async def load_source(self, location: str, tag: str) -> SourceLoadResult:
        """Retrieve and parse one source, mapping failures to an empty result.

        Args:
            location: File path or http(s) URL.
            tag: Source tag.

        Returns:
            Per-source load result.
        """
        self.logger.debug(f"Loading CSV from: {location} ({tag})")

        try:
            text = await self.fetch_text(location, tag)
        except SourceUnavailableError as e:
            self.logger.warning(str(e))
            return SourceLoadResult(tag=tag, location=location, error=e.reason)

        records = self._record_parser.parse(text, tag)
        self.logger.info(f"{tag}: {len(records)} movies loaded")
        return SourceLoadResult(tag=tag, location=location, records=tuple(records))

    async def fetch_text(self, location: str, tag: str) -> str:
        """Retrieve the raw text of one source.

        Args:
            location: File path or http(s) URL.
            tag: Source tag, used in error reporting.

        Returns:
            Document text, possibly empty.

        Raises:
            SourceUnavailableError: If the source cannot be retrieved.
        """
        if is_url(location):
            return await self._fetch_url(location, tag)
        return await self._read_file(Path(location), tag)

    def resolve_location(self, location: str) -> str:
        """Resolve a relative file location against the configured base path.

        Args:
            location: Configured location.

        Returns:
            URL unchanged, or file path as a string.
        """
        if is_url(location):
            return location

        return str(resolve_path(location, self._collection_config.base_path))

    async def _fetch_url(self, url: str, tag: str) -> str:
        """Fetch a source over HTTP."""
        try:
            async with self._get_session().get(url) as response:
                if response.status >= 400:
                    raise SourceUnavailableError(tag, url, f"HTTP {response.status}")
                return await response.text(errors="replace")
        except aiohttp.ClientError as e:
            raise SourceUnavailableError(tag, url, str(e) or type(e).__name__) from e
        except asyncio.TimeoutError as e:
            raise SourceUnavailableError(tag, url, "timed out") from e

    async def _read_file(self, path: Path, tag: str) -> str:
        """Read a source from the local filesystem."""
        if not path.is_file():
            raise SourceUnavailableError(tag, str(path), "file not found")

        try:
            async with aiofiles.open(
                path, "r", encoding="utf-8-sig", errors="replace", newline=""
            ) as f:
                return await f.read()
        except OSError as e:
            raise SourceUnavailableError(tag, str(path), str(e)) from e

    def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session.

        Returns:
            HTTP session.
        """
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._collection_config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "CollectionLoader":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
