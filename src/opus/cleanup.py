# SPDX-License-Identifier: MIT

import atexit

from opus.logic.manager import LogicManager
from opus.repository.configuration import CONFIGURATION_REPO


def flush_and_stop(logic: LogicManager) -> None:
    CONFIGURATION_REPO.flush()
    logic.flush()
    logic.stop_sync()


def register_cleanup(logic: LogicManager) -> None:
    atexit.register(flush_and_stop, logic)
