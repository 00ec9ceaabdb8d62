class BallotBoxError(Exception):
    """Base class for election and voting errors.

    ``status_code`` is the HTTP status the API answers with when the error
    reaches a route.
    """

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(BallotBoxError):
    """Raised for malformed election input or an out-of-range option."""

    status_code = 400


class NotFoundError(BallotBoxError):
    """Raised when an election cannot be found."""

    status_code = 404


class DuplicateVoteError(BallotBoxError):
    """Raised when a user has already voted in an election."""

    status_code = 409


class ElectionClosedError(BallotBoxError):
    """Raised when voting is attempted on an election that is upcoming or ended."""

    status_code = 409


class PermissionDeniedError(BallotBoxError):
    """Raised when a user may not vote in an election (e.g. its creator)."""

    status_code = 403


class StoreError(BallotBoxError):
    """Raised when the record store fails (network, permission, quota)."""

    status_code = 503
