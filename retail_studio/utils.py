import json
import re
import uuid


def new_element_id() -> str:
    """Return a fresh element id.

    Example: "el-3f9c2a1b7d4e"
    """
    return f"el-{uuid.uuid4().hex[:12]}"


def strip_code_fences(text: str) -> str:
    """Remove markdown ```json fences a model may wrap around its reply."""
    return re.sub(r"```(?:json)?", "", text).strip()


def extract_json_object(text: str) -> dict:
    """Parse the first {...} block in a model reply.

    Raises ValueError when no object is present or the block does not parse.
    """
    cleaned = strip_code_fences(text)
    start = cleaned.find("{")
    end = cleaned.rfind("}") + 1
    if start == -1 or end == 0:
        raise ValueError("No JSON object found in response")
    data = json.loads(cleaned[start:end])
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object, got {type(data).__name__}")
    return data
