# SPDX-License-Identifier: MIT

from opus.model.priority import Priority
from opus.model.task import Task
from opus.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "name": "",
        "priority": Priority.NONE,
        "status": None,
        "note": None,
        "deadline": None,
        "tags": set(),
        "created": now,
        "updated": now,
    }
