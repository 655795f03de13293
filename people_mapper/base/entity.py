from dataclasses import dataclass
from typing import Optional, Union


class Unsaved:
    """
    State of a person that has never been written to the table.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSAVED"


UNSAVED = Unsaved()


@dataclass(frozen=True)
class Persisted:
    id: int


PersistenceState = Union[Unsaved, Persisted]


class Person:
    """
    In-memory copy of one row of the ``people`` table.

    A new person starts as UNSAVED. Only the mapper moves it to ``Persisted``,
    either after a successful insert or when building it from a fetched row.
    Setting the name or email fields never talks to the database; the change
    is written on the next ``PersonMapper.save``.
    """

    def __init__(self, first_name: str, last_name: str, email: str):
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self._state: PersistenceState = UNSAVED

    @property
    def state(self) -> PersistenceState:
        return self._state

    @property
    def id(self) -> Optional[int]:
        if isinstance(self._state, Persisted):
            return self._state.id
        return None

    @property
    def is_persisted(self) -> bool:
        return isinstance(self._state, Persisted)

    def _mark_persisted(self, pk_value: int):
        self._state = Persisted(pk_value)

    def values(self):
        return dict(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )

    def __eq__(self, other):
        if not isinstance(other, Person):
            return NotImplemented
        return self._state == other._state and self.values() == other.values()

    # mutable, so not usable in sets or as dict keys
    __hash__ = None

    def __repr__(self):
        return f"Person(id={self.id} first_name={self.first_name} last_name={self.last_name} email={self.email})"
