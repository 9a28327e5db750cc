# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pytest

from opus import configuration
from opus.logic.manager import LogicManager
from opus.repository.configuration import CONFIGURATION_REPO
from opus.repository.storage import TaskStorage
from opus.repository.task import TaskRepository
from opus.sync.manager import SyncManager

from fakes import RecordingSyncService, typical_tasks


@pytest.fixture()
def repository() -> TaskRepository:
    """Repository holding the typical tasks, without sync."""
    return TaskRepository(typical_tasks())


@pytest.fixture()
def sync_service() -> RecordingSyncService:
    return RecordingSyncService()


@pytest.fixture()
def sync_manager(sync_service: RecordingSyncService) -> SyncManager:
    manager = SyncManager(sync_service)
    manager.start_sync()
    return manager


@pytest.fixture()
def synced_repository(sync_manager: SyncManager) -> TaskRepository:
    return TaskRepository(typical_tasks(), sync=sync_manager)


@pytest.fixture()
def logic(tmp_path: Path, synced_repository: TaskRepository) -> LogicManager:
    return LogicManager(synced_repository, TaskStorage(tmp_path / "tasks.yaml"))


@pytest.fixture()
def isolated_paths(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point every config, data and log path at tmp_path."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "log")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(
        configuration, "DATA_TASKS_PATH", tmp_path / "data" / "tasks.yaml"
    )
    CONFIGURATION_REPO.reload()
    yield tmp_path
    CONFIGURATION_REPO.reload()
