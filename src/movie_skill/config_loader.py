"""
Configuration loader with validation.
"""
from dotenv import load_dotenv
from .config import SkillConfig
from .config_validator import get_required_env, get_optional_env, parse_number, validate_url


def load_config_from_env() -> SkillConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        skill = MovieSkillApp(config)
        skill.initialize()

    :return: Validated SkillConfig instance
    :raises: ConfigurationError if required configs are missing or invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    base_url = get_required_env(
        "CP_URL",
        description="Base URL of the movie server, e.g. http://localhost:5050"
    )
    api_key = get_required_env(
        "CP_API_KEY",
        description="API key of the movie server (Settings > General > API key)"
    )

    return SkillConfig(
        base_url=validate_url(base_url, "CP_URL"),
        api_key=api_key,
        request_timeout=parse_number(get_optional_env("CP_TIMEOUT", "10"), "CP_TIMEOUT", float),
        max_workers=parse_number(get_optional_env("CP_MAX_WORKERS", "4"), "CP_MAX_WORKERS", int),
        log_level=get_optional_env("LOG_LEVEL", "INFO").upper(),
    )
