"""Repository for the JSON state file holding the forecast API key."""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from goforecast.config.defaults import STATE_FILENAME
from goforecast.errors import StateReadError, StateWriteError
from goforecast.models.state import PersistedState

logger = logging.getLogger(__name__)

# A file holding JSON null counts as "no stored key".
_STATE_ADAPTER = TypeAdapter(PersistedState | None)


class StateRepo:
    """Reads and writes ``<state_dir>/.goforecast``.

    No locking: concurrent invocations race and the last writer wins.
    """

    def __init__(self, state_dir: str | Path, filename: str = STATE_FILENAME):
        self.path = Path(state_dir) / filename

    def restore(self) -> PersistedState | None:
        """Load state from disk. Returns None if the file does not exist."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error("Could not read state file %s: %s", self.path, e)
            raise StateReadError(f"could not read {self.path}: {e}") from e

        try:
            return _STATE_ADAPTER.validate_json(raw)
        except ValidationError as e:
            logger.error("Corrupt state file %s: %s", self.path, e)
            raise StateReadError(f"could not parse {self.path}: {e}") from e

    def dump(self, state: PersistedState) -> None:
        """Write state to disk, replacing any previous content."""
        try:
            self.path.write_text(state.model_dump_json())
        except OSError as e:
            logger.error("Could not write state file %s: %s", self.path, e)
            raise StateWriteError(f"could not write {self.path}: {e}") from e
