# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from opus import configuration
from opus.exceptions import SyncUnavailableError
from opus.logging_setup import setup_logging
from opus.logic.manager import LogicManager
from opus.repository.configuration import CONFIGURATION_REPO
from opus.repository.storage import TaskStorage
from opus.repository.task import TaskRepository
from opus.sync.logging_service import LoggingSyncService
from opus.sync.manager import SyncManager
from opus.view import state as view_state

logger = logging.getLogger(__name__)


def initialize(data_path: Optional[str] = None, verbose: bool = False) -> LogicManager:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()
    configuration.load_data_path_configuration(data_path)
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    config = CONFIGURATION_REPO.get_config()
    setup_logging(
        console_level="DEBUG" if verbose else config["log_level"],
        log_dir=configuration.LOG_PATH,
    )
    view_state.set_show_header(config["show_header"])

    storage = TaskStorage(configuration.DATA_TASKS_PATH)
    repository = TaskRepository(
        storage.load_tasks(), sync=SyncManager(LoggingSyncService())
    )
    logic = LogicManager(repository, storage)

    if config["sync_enabled"]:
        try:
            logic.start_sync()
        except SyncUnavailableError as e:
            logger.warning("could not start sync: %s", e)

    return logic


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))
