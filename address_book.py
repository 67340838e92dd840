import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


def person_path(person_id: int) -> str:
    return f"/contacts/person/{person_id}"


@dataclass
class Person:
    id: int
    name: str

    def href(self, base_url: str) -> str:
        return base_url.rstrip("/") + person_path(self.id)


class AddressBook:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._people: List[Person] = []
        self._counter = 0

    def next_id(self) -> int:
        """Issue a fresh id without inserting anything."""
        with self._lock:
            self._counter += 1
            return self._counter

    def add(self, person: Person) -> None:
        with self._lock:
            self._people.append(person)
        logger.info("Added person %s", person.id)

    def get(self, person_id: int) -> Optional[Person]:
        with self._lock:
            return self._find(person_id)

    def list(self) -> List[Person]:
        with self._lock:
            return list(self._people)

    def replace(self, person_id: int, name: str) -> bool:
        with self._lock:
            person = self._find(person_id)
            if person is None:
                return False
            person.name = name
        logger.info("Renamed person %s", person_id)
        return True

    def remove(self, person_id: int) -> bool:
        with self._lock:
            person = self._find(person_id)
            if person is None:
                return False
            self._people.remove(person)
        logger.info("Removed person %s", person_id)
        return True

    def clear(self) -> None:
        """Drop every person and rewind the id counter."""
        with self._lock:
            self._people.clear()
            self._counter = 0
        logger.info("Address book cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._people)

    def _find(self, person_id: int) -> Optional[Person]:
        # caller holds the lock
        for person in self._people:
            if person.id == person_id:
                return person
        return None
