"""Forecast API key resolution: state file first, then the environment."""

import logging
import os
from collections.abc import Mapping

from goforecast.config.defaults import FORECAST_IO_ENV_KEY
from goforecast.errors import MissingAPIKeyError
from goforecast.models.state import PersistedState
from goforecast.storage.state_repo import StateRepo

logger = logging.getLogger(__name__)


class KeyResolver:
    def __init__(
        self,
        state_repo: StateRepo,
        env_var: str = FORECAST_IO_ENV_KEY,
        environ: Mapping[str, str] | None = None,
    ):
        self.state_repo = state_repo
        self.env_var = env_var
        self.environ = environ if environ is not None else os.environ

    def resolve(self) -> str:
        """Return the API key and persist it to the state file.

        The key is written back even when it was just read from disk, so a
        key supplied once through the environment sticks for later runs.
        """
        state = self.state_repo.restore()
        stored = state.api_key.strip() if state is not None else ""
        if stored:
            key = stored
            logger.info("Using forecast API key from %s", self.state_repo.path)
        else:
            key = self.environ.get(self.env_var, "").strip()
            if not key:
                raise MissingAPIKeyError(
                    "could not find Forecast IO API key. "
                    f'Please set with "export {self.env_var}=<key>"'
                )
            logger.info("Using forecast API key from $%s", self.env_var)

        self.state_repo.dump(PersistedState(api_key=key))
        return key
