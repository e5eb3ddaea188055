from starlette import status


class RecordsError(Exception):
    """Base failure of the records store, carries the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RecordsError):
    status_code = status.HTTP_404_NOT_FOUND


class RecordValidationError(RecordsError):
    """Missing or invalid field, unresolved reference or empty update."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(RecordsError):
    """Delete blocked by records that still reference the target."""

    status_code = status.HTTP_400_BAD_REQUEST


class StorageError(RecordsError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
