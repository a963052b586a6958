"""Record loader merging the manifest with evaluation documents.

The manifest is the source of truth for which servers exist; evaluation
documents supply their content. Servers without a document get a
placeholder record so every manifest entry is listed.
"""

import logging
from functools import cmp_to_key

from src.catalog.identity import extract_server_info
from src.consts import CACHE_KEY_ALL, PENDING_DESCRIPTION
from src.models.model_identity import ServerInfo
from src.models.model_server import (
    Author,
    LocalServerConfig,
    ProtocolFeatures,
    RemoteOrigin,
    RemoteServerConfig,
    RepositoryOrigin,
    ServerRecord,
)
from src.models.model_storage import EvaluationLoadResult
from src.storage.cache.base import Cache
from src.storage.cache.memory_cache import MemoryCache
from src.storage.permanent_storage.base import CatalogStorage, ManifestError

logger = logging.getLogger(__name__)


def build_placeholder(info: ServerInfo, url: str) -> ServerRecord:
    """Synthesize a record for a manifest entry that has not been evaluated."""
    if info.is_remote:
        remote_url = info.remote_url or url
        return ServerRecord(
            name=info.name,
            display_name=f"{info.org[:1].upper()}{info.org[1:]} MCP",
            description=PENDING_DESCRIPTION,
            author=Author(name=info.org),
            origin=RemoteOrigin(url=remote_url),
            server=RemoteServerConfig(url=remote_url),
            protocol_features=ProtocolFeatures(),
            dependencies=[],
        )

    display_name = info.repo
    if info.repository_path:
        display_name = info.repository_path.split("/")[-1] or info.repo
    return ServerRecord(
        name=info.name,
        display_name=display_name,
        description=PENDING_DESCRIPTION,
        author=Author(name=info.org),
        origin=RepositoryOrigin(
            owner=info.org,
            repo=info.repo,
            path=info.repository_path,
            url=url,
        ),
        server=LocalServerConfig(),
        protocol_features=ProtocolFeatures(),
        dependencies=[],
    )


def _with_remote_url(record: ServerRecord, remote_url: str) -> ServerRecord:
    """Point a remote evaluation at the endpoint listed in the manifest."""
    if not isinstance(record.server, RemoteServerConfig):
        return record
    update = {"server": record.server.model_copy(update={"url": remote_url})}
    if isinstance(record.origin, RemoteOrigin):
        update["origin"] = record.origin.model_copy(update={"url": remote_url})
    return record.model_copy(update=update)


def _compare_ranking(a: ServerRecord, b: ServerRecord) -> int:
    # Evaluated first (score desc, then stars desc when both have a repository),
    # then unevaluated by name
    if (a.quality_score is None) != (b.quality_score is None):
        return -1 if a.quality_score is not None else 1

    if a.quality_score is not None and b.quality_score is not None:
        if a.quality_score != b.quality_score:
            return b.quality_score - a.quality_score
        if a.repository is not None and b.repository is not None:
            return b.repository.stars - a.repository.stars
        return 0

    name_a, name_b = a.sort_name.casefold(), b.sort_name.casefold()
    return (name_a > name_b) - (name_a < name_b)


def rank_records(records: list[ServerRecord]) -> list[ServerRecord]:
    """Sort records by the catalog ranking policy. Stable for ties."""
    return sorted(records, key=cmp_to_key(_compare_ranking))


class CatalogLoader:
    """Loads catalog records from storage and caches them by lookup key.

    Args:
        storage: Where the manifest and evaluation documents live.
        cache: Result cache. Defaults to a fresh in-memory cache.
        debug: Clear the whole cache on every load call.
    """

    def __init__(self, storage: CatalogStorage, cache: Cache | None = None, debug: bool = False):
        self.storage = storage
        self.cache = cache if cache is not None else MemoryCache()
        self.debug = debug

    def clear_cache(self) -> None:
        self.cache.clear()

    def _evaluations(self, name: str | None) -> dict[str, ServerRecord]:
        if name:
            result = self.storage.load_evaluation(name)
            results = [result] if result is not None else []
        else:
            results = self.storage.load_evaluations()

        evaluations: dict[str, ServerRecord] = {}
        for result in results:
            self._collect(result, evaluations)
        return evaluations

    def _collect(self, result: EvaluationLoadResult, evaluations: dict[str, ServerRecord]) -> None:
        if not result.ok:
            logger.warning(f"Failed to load evaluation file {result.key}: {result.error}")
            return
        # Keyed by the document's own name, not the file name
        evaluations[result.record.name] = result.record

    def load_records(self, name: str | None = None) -> list[ServerRecord]:
        """Load catalog records.

        Args:
            name: Identity to look up. None loads every record.

        Returns:
            A one-element list (or empty) for a name lookup. Otherwise every
            record: evaluated ones by score then stars, descending, followed
            by unevaluated ones alphabetically.
        """
        if self.debug:
            self.cache.clear()

        cache_key = name or CACHE_KEY_ALL
        cached = self.cache.get(cache_key)
        if cached is not None:
            return list(cached)

        evaluations = self._evaluations(name)

        try:
            urls = self.storage.load_manifest()
        except ManifestError as e:
            logger.error(f"Failed to load manifest: {e}")
            return []

        records: list[ServerRecord] = []
        seen: set[str] = set()
        for url in urls:
            info = extract_server_info(url)
            if name and info.name != name:
                continue
            if info.name in seen:
                continue
            seen.add(info.name)

            evaluation = evaluations.get(info.name)
            if evaluation is not None:
                if info.is_remote and info.remote_url:
                    evaluation = _with_remote_url(evaluation, info.remote_url)
                records.append(evaluation)
            else:
                records.append(build_placeholder(info, url))

            if name:
                # Single lookups stop at the first match
                self.cache.set(cache_key, records)
                return list(records)

        if not name:
            records = rank_records(records)
        self.cache.set(cache_key, records)
        logger.debug(f"Loaded {len(records)} records ({len(evaluations)} evaluated)")
        return list(records)

    def count_records_in_repo(
        self, record: ServerRecord, all_records: list[ServerRecord] | None = None
    ) -> int:
        """Count records sharing ``record``'s owner and repo (at least 1).

        Args:
            record: Target record. Remote records always count as 1.
            all_records: Population to count in. Loaded when not supplied.
        """
        repository = record.repository
        if repository is None:
            return 1

        if all_records is None:
            all_records = self.load_records()

        count = sum(
            1
            for other in all_records
            if other.repository is not None
            and other.repository.owner == repository.owner
            and other.repository.repo == repository.repo
        )
        return max(1, count)
