"""Page and form state behind the settings console.

The browser page in ``frontend/`` renders the same behaviour; this
controller keeps it in plain Python so it can drive the API from scripts
and tests.
"""
import json
import logging
from typing import Any, Callable, Dict, List, Optional

from console.client import ApiError, SettingsApiClient

logger = logging.getLogger(__name__)

CREATE_TEMPLATE = '{\n  "example": "value"\n}'
DELETE_PROMPT = "Are you sure you want to delete this setting?"
INVALID_JSON = "Invalid JSON format"


class InvalidJson(ValueError):
    pass


def parse_json_text(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as exc:
        raise InvalidJson(INVALID_JSON) from exc


class SettingsConsole:
    def __init__(self, client: SettingsApiClient, limit: int = 10):
        self.client = client
        self.limit = limit
        self.items: List[Dict[str, Any]] = []
        self.pagination: Dict[str, int] = {
            "page": 1,
            "limit": limit,
            "total_count": 0,
            "total_pages": 0,
        }
        self.create_text = CREATE_TEMPLATE
        self.editing_uid: Optional[str] = None
        self.edit_text = ""
        self.error: Optional[str] = None
        self.notice: Optional[str] = None

    @property
    def page(self) -> int:
        return self.pagination["page"]

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pagination["total_pages"]

    def load(self, page: Optional[int] = None) -> bool:
        """Fetch ``page`` (default: the current one) and replace the items."""
        self.error = None
        try:
            body = self.client.list(page=page or self.page, limit=self.limit)
        except ApiError:
            logger.exception("Failed to fetch settings")
            self.error = "Failed to fetch settings"
            return False
        self.items = body["data"]
        self.pagination = body["pagination"]
        return True

    def next_page(self) -> bool:
        if not self.has_next:
            return False
        return self.load(self.page + 1)

    def previous_page(self) -> bool:
        if not self.has_previous:
            return False
        return self.load(self.page - 1)

    def _mutate(self, action: Callable[[], Any], failure: str) -> bool:
        self.notice = None
        try:
            action()
        except ApiError:
            logger.exception(failure)
            self.notice = failure
            return False
        self.load()
        return True

    def create(self, text: Optional[str] = None) -> bool:
        if text is not None:
            self.create_text = text
        try:
            data = parse_json_text(self.create_text)
        except InvalidJson as exc:
            self.notice = str(exc)
            return False
        created = self._mutate(lambda: self.client.create(data), "Failed to create setting")
        if created:
            self.create_text = CREATE_TEMPLATE
        return created

    def start_edit(self, uid: str) -> bool:
        """Put ``uid`` in edit mode; any other record leaves edit mode."""
        record = next((item for item in self.items if item["uid"] == uid), None)
        if record is None:
            try:
                record = self.client.get(uid)
            except ApiError:
                logger.exception("Failed to fetch setting")
                self.notice = "Failed to fetch setting"
                return False
        self.editing_uid = uid
        self.edit_text = json.dumps(record["data"], indent=2)
        return True

    def cancel_edit(self) -> None:
        self.editing_uid = None
        self.edit_text = ""

    def save_edit(self, text: Optional[str] = None) -> bool:
        if self.editing_uid is None:
            return False
        if text is not None:
            self.edit_text = text
        try:
            data = parse_json_text(self.edit_text)
        except InvalidJson as exc:
            self.notice = str(exc)
            return False
        uid = self.editing_uid
        saved = self._mutate(lambda: self.client.update(uid, data), "Failed to update setting")
        if saved:
            self.cancel_edit()
        return saved

    def delete(self, uid: str, confirm: Callable[[str], bool]) -> bool:
        if not confirm(DELETE_PROMPT):
            return False
        return self._mutate(lambda: self.client.delete(uid), "Failed to delete setting")
