from typing import Optional


class SubmissionError(Exception):
    """Base for every failure that ends a submission in the Failed phase."""


class EmptyUrlError(SubmissionError):
    def __init__(self, message: str = "Please paste a YouTube URL."):
        super().__init__(message)


class TransportError(SubmissionError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RequestTimeoutError(TransportError):
    def __init__(self, timeout: float):
        super().__init__(f"Request timed out after {timeout:g}s.")
        self.timeout = timeout


class ResultParseError(SubmissionError):
    pass


class InvalidTransitionError(RuntimeError):
    pass
