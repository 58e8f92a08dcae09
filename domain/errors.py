class TaskServiceError(Exception):
    """Base error; every subclass maps to one HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TaskServiceError):
    status_code = 400


class NotFoundError(TaskServiceError):
    status_code = 404


class StorageError(TaskServiceError):
    status_code = 500


class ProviderError(TaskServiceError):
    status_code = 500


class ConfigError(TaskServiceError):
    status_code = 500
