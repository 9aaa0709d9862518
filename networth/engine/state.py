# engine/state.py
from typing import Dict, List

from .storage import load_plans, save_plans


class PlanState:
    """Named scenario payloads persisted to a single JSON file.

    The in-memory copy only changes after the file write succeeds.
    """

    def __init__(self, storage_path: str = "user_data/plans.json"):
        self.storage_path = storage_path
        self.plans: Dict[str, dict] = load_plans(storage_path)

    def list_names(self) -> List[str]:
        return sorted(self.plans.keys())

    def get(self, name: str) -> dict | None:
        return self.plans.get(name)

    def save(self, name: str, payload: dict) -> None:
        updated = dict(self.plans)
        updated[name] = payload
        self._commit(updated)

    def delete(self, name: str) -> bool:
        if name not in self.plans:
            return False
        updated = {key: value for key, value in self.plans.items() if key != name}
        self._commit(updated)
        return True

    def _commit(self, plans: Dict[str, dict]) -> None:
        save_plans(self.storage_path, plans)
        self.plans = plans
