from dataclasses import dataclass


@dataclass
class SkillConfig:
    # Movie service
    base_url: str
    api_key: str

    # Remote calls
    request_timeout: float = 10.0
    max_workers: int = 4

    # Logging
    log_level: str = "INFO"
