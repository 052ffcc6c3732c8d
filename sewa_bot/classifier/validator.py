import json
import os
from functools import lru_cache
from typing import Any, Dict, Tuple

from jsonschema import ValidationError, validate

# Path: sewa_bot/classifier/schemas/
SCHEMA_DIR = os.path.join(
    os.path.dirname(__file__),
    "schemas"
)

CLASSIFICATION_SCHEMA = "classification.json"


@lru_cache(maxsize=None)
def load_schema(filename: str = CLASSIFICATION_SCHEMA) -> Dict[str, Any]:
    """
    Load a bundled JSON schema file.
    """
    path = os.path.join(SCHEMA_DIR, filename)

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_classification(data: Any) -> Tuple[bool, str]:
    """
    Validate a provider's parsed JSON against the classification schema.

    Returns:
        (True, "") if valid
        (False, "<error message>") if invalid
    """
    try:
        validate(instance=data, schema=load_schema())
        return True, ""
    except ValidationError as e:
        return False, e.message
