import typing


class HasManyException(Exception):
    """
    Base exception class for all relation related errors.

    Carries an optional `detail` message next to the positional arguments so
    callers can raise with either style.
    """

    def __init__(
        self,
        *args: typing.Any,
        detail: str = "",
    ):
        """
        Initializes the HasManyException.

        Args:
            *args (typing.Any): Variable length argument list to be included
                in the exception message.
            detail (str, optional): A more detailed explanation of the exception.
                Defaults to an empty string.
        """
        self.detail = detail
        super().__init__(*(str(arg) for arg in args if arg), self.detail)

    def __repr__(self) -> str:
        if self.detail:
            return f"{type(self).__name__} - {self.detail}"
        return type(self).__name__

    def __str__(self) -> str:
        return "".join(self.args).strip()


class ImproperlyConfigured(HasManyException):
    """
    Exception raised when the settings or a relation declaration are invalid.

    Raised at declaration time, never while a relation proxy is in use.
    """


class RelationshipIncompatible(HasManyException):
    """
    Exception raised when an object handed to a relation is not an instance of
    the related model.

    The relation is left untouched when this is raised.
    """
