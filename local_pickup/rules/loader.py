from pathlib import Path

import yaml
from pydantic import ValidationError

from local_pickup.rules.models import Rules


def load_rules(path: Path) -> Rules:
    """
    Read rules.yaml and validate it against the Rules schema.

    Raises:
        FileNotFoundError: the file does not exist
        ValueError: the YAML is unparseable or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    if data is None:
        raise ValueError(f"Rules file is empty: {path}")

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
