"""Dataset loader - one fetch per session, terminal on failure."""

import httpx
from loguru import logger
from pydantic import ValidationError

from app.models.common import LoadState
from app.models.governance import Dataset
from app.repositories.base import BaseRepository


class DatasetLoader(BaseRepository):
    """Owns the pending -> ready | failed lifecycle of the seed dataset."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._state = LoadState.pending()

    @property
    def state(self) -> LoadState:
        return self._state

    def load(self) -> LoadState:
        """Fetch and parse once. Later calls return the settled state without re-fetching."""
        if self._state.is_terminal:
            return self._state

        try:
            dataset = Dataset.model_validate_json(self.read_text())
        except (OSError, UnicodeDecodeError, httpx.HTTPError, ValidationError) as e:
            logger.error("Dataset load failed from {}: {}", self.source, e)
            self._state = LoadState.failed(str(e))
            return self._state

        logger.info(
            "Dataset loaded: {} assemblies, {} modules, {} audit years",
            len(dataset.assemblies),
            len(dataset.modules),
            len(dataset.audit_timeline),
        )
        self._state = LoadState.ready(dataset)
        return self._state
