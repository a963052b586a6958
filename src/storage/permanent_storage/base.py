"""Abstract base class for catalog storage backends.

Storage holds the manifest of origin URLs and one evaluation document per
evaluated server. Reading an individual document never raises; failures
are reported in the returned result so callers can log and continue.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from src.models.model_server import ServerRecord
from src.models.model_storage import EvaluationLoadResult


class ManifestError(Exception):
    """Raised when the manifest cannot be read or is not a list of URLs."""


class CatalogStorage(ABC):
    """Abstract base class for catalog storage implementations."""

    @abstractmethod
    def load_manifest(self) -> list[str]:
        """Load the list of origin URLs.

        Returns:
            URLs in manifest order.

        Raises:
            ManifestError: If the manifest is missing, unreadable or malformed.
        """
        ...

    @abstractmethod
    def load_evaluation(self, name: str) -> EvaluationLoadResult | None:
        """Load one evaluation document.

        Args:
            name: Server identity (document file stem).

        Returns:
            Load result, or None when no document exists for ``name``.
        """
        ...

    @abstractmethod
    def load_evaluations(self) -> list[EvaluationLoadResult]:
        """Load every evaluation document, one result per document."""
        ...

    @abstractmethod
    def save_evaluation(self, record: ServerRecord) -> Path:
        """Persist an evaluation document.

        Returns:
            Path where the document was written.
        """
        ...

    @abstractmethod
    def list_evaluation_keys(self) -> list[str]:
        """List identities that have an evaluation document."""
        ...
