"""File-based storage for the catalog manifest and evaluation documents."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from src.consts import DEFAULT_DATA_DIR, EVALUATIONS_DIRNAME, MANIFEST_FILENAME
from src.models.model_server import ServerRecord
from src.models.model_storage import EvaluationLoadResult
from src.storage.permanent_storage.base import CatalogStorage, ManifestError

logger = logging.getLogger(__name__)


class FileManager(CatalogStorage):
    """File-based storage manager for catalog data.

    Directory structure:
        data/
        ├── mcp-servers.json                 # JSON array of origin URLs
        └── mcp-evaluations/{identity}.json  # One document per evaluated server
    """

    def __init__(self, data_dir: Path | str = DEFAULT_DATA_DIR):
        """Initialize FileManager with data directory.

        Args:
            data_dir: Root directory holding the manifest and evaluations.
        """
        self.data_dir = Path(data_dir)
        self.manifest_path = self.data_dir / MANIFEST_FILENAME
        self.evaluations_dir = self.data_dir / EVALUATIONS_DIRNAME

    def _ensure_dirs(self, *dirs: Path) -> None:
        """Create directories if they don't exist."""
        for d in dirs:
            d.mkdir(parents=True, exist_ok=True)

    def _evaluation_path(self, name: str) -> Path:
        return self.evaluations_dir / f"{name}.json"

    # === MANIFEST ===

    def load_manifest(self) -> list[str]:
        try:
            data = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ManifestError(f"Failed to read {self.manifest_path}: {e}") from e

        if not isinstance(data, list) or not all(isinstance(url, str) for url in data):
            raise ManifestError(f"{self.manifest_path} must be a JSON array of URLs")
        return data

    def save_manifest(self, urls: list[str]) -> Path:
        """Write the manifest. Used by tooling that seeds a data directory."""
        self._ensure_dirs(self.data_dir)
        self.manifest_path.write_text(json.dumps(urls, indent=2) + "\n", encoding="utf-8")
        logger.info(f"Saved manifest: {self.manifest_path} ({len(urls)} urls)")
        return self.manifest_path

    # === EVALUATIONS ===

    def _read_evaluation(self, path: Path) -> EvaluationLoadResult:
        key = path.stem
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            record = ServerRecord.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            return EvaluationLoadResult(key=key, error=f"{type(e).__name__}: {e}")
        return EvaluationLoadResult(key=key, record=record)

    def load_evaluation(self, name: str) -> EvaluationLoadResult | None:
        path = self._evaluation_path(name)
        if not path.exists():
            return None
        return self._read_evaluation(path)

    def load_evaluations(self) -> list[EvaluationLoadResult]:
        if not self.evaluations_dir.exists():
            logger.warning(f"Evaluations directory not found: {self.evaluations_dir}")
            return []
        return [self._read_evaluation(path) for path in sorted(self.evaluations_dir.glob("*.json"))]

    def save_evaluation(self, record: ServerRecord) -> Path:
        self._ensure_dirs(self.evaluations_dir)
        path = self._evaluation_path(record.name)
        data = record.model_dump(mode="json")
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        logger.debug(f"Saved evaluation: {path}")
        return path

    def list_evaluation_keys(self) -> list[str]:
        if not self.evaluations_dir.exists():
            return []
        return sorted(path.stem for path in self.evaluations_dir.glob("*.json"))
