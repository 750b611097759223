"""API errors and load-state gate."""

from app.models.common import LoadState, LoadStatus
from app.models.governance import Dataset


class DatasetNotReadyError(Exception):
    """Dataset is still pending or failed to load."""

    def __init__(self, state: LoadState):
        self.state = state
        if state.status == LoadStatus.FAILED:
            self.message = f"Dataset failed to load: {state.error}"
        else:
            self.message = "Dataset not loaded yet"
        super().__init__(self.message)


def require_dataset(state: LoadState) -> Dataset:
    """Return the loaded dataset or raise if the load has not succeeded."""
    if not state.is_ready:
        raise DatasetNotReadyError(state)
    return state.dataset
