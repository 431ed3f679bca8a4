import logging
import threading

from .exceptions import AlreadyExists, InvalidInput, NotFound
from .models import StringRecord
from .utils import analyze_string

logger = logging.getLogger(__name__)


class RecordStore:
    """
    In-memory store of analyzed strings keyed by their raw value.

    Records live as long as the process. The lock makes insert, delete and
    snapshot iteration atomic when requests are served from several threads.
    """

    def __init__(self):
        self._records = {}
        self._lock = threading.RLock()

    def insert(self, value) -> StringRecord:
        if not isinstance(value, str) or not value:
            raise InvalidInput(value=value)

        with self._lock:
            if value in self._records:
                raise AlreadyExists(value=value)
            record = StringRecord(value=value, properties=analyze_string(value))
            self._records[value] = record

        logger.info("Stored string id=%s length=%s", record.id, record.properties.length)
        return record

    def get(self, value) -> StringRecord:
        try:
            return self._records[value]
        except (KeyError, TypeError):
            raise NotFound(value=value)

    def delete(self, value):
        with self._lock:
            try:
                record = self._records.pop(value)
            except (KeyError, TypeError):
                raise NotFound(value=value)
        logger.info("Deleted string id=%s", record.id)

    def all(self):
        """Snapshot of (value, record) pairs. No ordering is guaranteed."""
        with self._lock:
            return list(self._records.items())

    def clear(self):
        with self._lock:
            self._records.clear()

    def __len__(self):
        return len(self._records)

    def __contains__(self, value):
        return value in self._records
