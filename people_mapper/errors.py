class PeopleMapperError(Exception):
    """
    Base class for errors raised by the mapper itself.
    Errors coming from the database (sqlalchemy.exc.*) are never wrapped.
    """


class UnsavedEntityError(PeopleMapperError):
    def __init__(self, person, operation):
        super().__init__(f"Cannot {operation} {person!r}: it has never been saved")
        self.person = person
        self.operation = operation


class UnknownFieldError(PeopleMapperError, ValueError):
    def __init__(self, field, allowed):
        super().__init__(f"Unknown field '{field}', expected one of: {', '.join(allowed)}")
        self.field = field


class DataIntegrityError(PeopleMapperError):
    pass


class AlreadySavedError(PeopleMapperError):
    def __init__(self, person):
        super().__init__(f"Cannot insert {person!r}: it is already saved with id={person.id}")
        self.person = person
