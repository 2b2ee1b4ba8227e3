"""Authoring error taxonomy. All of these are recoverable, user-facing conditions."""


class AuthoringError(Exception):
    """Base class; `code` is a stable identifier for UI and logs."""
    code = "authoring_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class AddressNotFound(AuthoringError):
    code = "address_not_found"


class InvalidDefinition(AuthoringError):
    code = "invalid_definition"


class InvalidImageCount(AuthoringError):
    code = "invalid_image_count"


class NoLettersSelected(AuthoringError):
    code = "no_letters_selected"


class InvalidAction(AuthoringError):
    """Action payload that does not parse as any action variant."""
    code = "invalid_action"


class WorkflowPreconditionUnmet(AuthoringError):
    code = "workflow_precondition_unmet"


class SubmissionFailed(AuthoringError):
    code = "submission_failed"


class StorageError(Exception):
    """Raised by assignment stores; the session reports it as SubmissionFailed."""
