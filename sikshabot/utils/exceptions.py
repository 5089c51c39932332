"""
Custom exceptions for the application.
"""


class ChatbotException(Exception):
    """Base exception for all chatbot-related errors."""
    pass


class CorpusLoadError(ChatbotException):
    """Raised when the corpus file cannot be read or parsed."""
    pass


class CorpusValidationError(ChatbotException):
    """Raised when a corpus document breaks a structural rule (e.g. an intent without responses)."""
    pass


class InvalidInputError(ChatbotException):
    """Raised when input validation fails."""
    pass
