#!/usr/bin/env python3
"""
Flask server for the movie voice skill.

Uses environment variables for configuration (see movie_skill.config_loader).
"""
import atexit
import os
import logging
from movie_skill.app import MovieSkillApp
from movie_skill.config_loader import load_config_from_env
from movie_skill.webhook import create_app

config = load_config_from_env()

# Setup logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)
# httpx logs full request URLs, which carry the movie server API key
logging.getLogger("httpx").setLevel(logging.WARNING)

skill = MovieSkillApp(config)
skill.initialize()
atexit.register(skill.close)

app = create_app(skill)


if __name__ == "__main__":
    port = int(os.getenv("PORT", 7860))
    logger.info(f"Serving movie skill on port {port}")
    app.run(host="0.0.0.0", port=port, debug=False)
