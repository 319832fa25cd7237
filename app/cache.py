import logging
import threading

from app.models import PokemonSpeciesData

logger = logging.getLogger(__name__)

class SpeciesCache:
    """
    In-memory store of resolved species records, keyed by normalized Pokemon name.

    Entries live for the whole process: there is no size limit, TTL or eviction.
    Only successful lookups are stored, unknown names are never cached.
    Concurrent misses on the same name may both write; the last write wins.
    """

    def __init__(self):
        self._records: dict[str, PokemonSpeciesData] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> PokemonSpeciesData | None:
        with self._lock:
            return self._records.get(name)

    def put(self, name: str, record: PokemonSpeciesData) -> None:
        with self._lock:
            self._records[name] = record
        logger.debug(f"Cached species record for: {name}")

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
