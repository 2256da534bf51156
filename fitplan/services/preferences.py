"""Small persisted user preferences (the active plan) stored as JSON next to the database."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ACTIVE_PLAN_KEY = "ActivePlanId"


class PreferenceStore:
    """Key/value preferences in a JSON file. A missing or unreadable file means no preferences."""

    def __init__(self, path: Path):
        self.path = path

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def get_active_plan_id(self) -> int | None:
        value = self._load().get(ACTIVE_PLAN_KEY)
        # JSON true/false load as bool, which is an int subclass
        return value if isinstance(value, int) and not isinstance(value, bool) else None

    def set_active_plan_id(self, plan_id: int) -> None:
        data = self._load()
        data[ACTIVE_PLAN_KEY] = plan_id
        self._save(data)

    def clear_active_plan_id(self) -> None:
        data = self._load()
        if data.pop(ACTIVE_PLAN_KEY, None) is not None:
            self._save(data)
