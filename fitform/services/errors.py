"""AI service errors, surfaced to the user as a message."""


class AIServiceError(Exception):
    """Base class for failures talking to the AI API."""

    def __init__(self, message: str = "AI service request failed"):
        super().__init__(message)
        self.message = message


class MissingAPIKeyError(AIServiceError):
    def __init__(self):
        super().__init__("OpenAI API key is missing. Please add it to your configuration.")


class InvalidAIResponseError(AIServiceError):
    def __init__(self, detail: str = ""):
        message = "Invalid response from API"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class AIHTTPError(AIServiceError):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP Error {status_code}: {message}")
        self.status_code = status_code
