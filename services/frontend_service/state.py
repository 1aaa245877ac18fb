"""
Hello page state machine

The page is in exactly one of loading, success or error. An attempt starts
in loading and resolves once into success or error; only a new attempt
leaves a resolved state.
"""

from typing import Optional

from shared.schemas.hello import HelloPageState, HelloResult

DEFAULT_ERROR_MESSAGE = "Failed to fetch"


class InvalidTransition(Exception):
    """Raised when an attempt is resolved twice"""


class HelloView:
    """State of one hello page"""

    def __init__(self):
        self.state = HelloPageState.LOADING
        self.message: Optional[str] = None
        self.error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.state == HelloPageState.LOADING

    def start(self) -> None:
        """Begin a new attempt, dropping any previous outcome"""
        self.state = HelloPageState.LOADING
        self.message = None
        self.error = None

    def succeed(self, message: str) -> None:
        if not self.is_loading:
            raise InvalidTransition(f"cannot succeed from {self.state.value}")
        self.state = HelloPageState.SUCCESS
        self.message = message
        self.error = None

    def fail(self, error: Optional[str]) -> None:
        if not self.is_loading:
            raise InvalidTransition(f"cannot fail from {self.state.value}")
        self.state = HelloPageState.ERROR
        self.message = None
        self.error = error or DEFAULT_ERROR_MESSAGE

    def to_result(self) -> HelloResult:
        return HelloResult(state=self.state, message=self.message, error=self.error)
