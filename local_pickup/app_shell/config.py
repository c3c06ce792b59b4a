import logging
import os
import sys
from pathlib import Path

from local_pickup.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "PICKUP_RULES_PATH"
DEFAULT_RULES_PATH = "rules.yaml"


def resolve_rules_path(explicit: str | None = None, base_dir: Path | None = None) -> Path:
    """
    Locate the rules file.

    Precedence: explicit path, then $PICKUP_RULES_PATH, then rules.yaml
    under base_dir (cwd by default).
    """
    if explicit:
        return Path(explicit)

    from_env = os.environ.get(RULES_PATH_ENV)
    if from_env:
        return Path(from_env)

    return (base_dir or Path(os.getcwd())) / DEFAULT_RULES_PATH


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    """
    missing = [env_var for env_var in rules.ops.required_env if env_var not in os.environ]

    if missing:
        logger.critical(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)

    logger.info("Configuration validated.")
