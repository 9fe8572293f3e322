class MovieSkillError(Exception):
    """Base exception for the movie voice skill."""


class ConfigurationError(MovieSkillError):
    """Raised when required configuration is missing or invalid."""


class ServiceError(MovieSkillError):
    """Raised when the movie service cannot be reached or returns an unreadable response."""


class ServiceTimeoutError(ServiceError):
    """Raised when outstanding movie service calls exceed the turn timeout."""


class SkillNotInitializedError(MovieSkillError):
    """Raised when the skill is used before initialization."""
