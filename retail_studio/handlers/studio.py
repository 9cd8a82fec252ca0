"""AWS Lambda handler exposing the editor engine to the host UI."""

import json

from ..api.serializers import (
    parse_elements,
    parse_format,
    serialize_element,
    serialize_report,
)
from ..clients.gemini import GeminiClient
from ..clients.llm import LLMClient
from ..clients.media import MediaClient, MediaDownloadError
from ..config import (
    GEMINI_API_KEY,
    GEMINI_IMAGE_MODEL,
    HTTP_TIMEOUT,
    OPENAI_API_KEY,
    OPENAI_MODEL,
)
from ..engine.audit import collect_text_contents, run_audit
from ..engine.layers import move_layer
from ..models.canvas import get_format
from ..services.assets import AssetService
from ..services.compliance import SemanticComplianceService
from ..services.creative import CreativeService
from ..templates import build
from ..templates.lep import apply_lep_template

CREATIVE_ACTIONS = ("magic_build", "write_copy", "add_background")


def _build_llm() -> LLMClient | None:
    return LLMClient(api_key=OPENAI_API_KEY, model=OPENAI_MODEL) if OPENAI_API_KEY else None


def _build_oracle() -> SemanticComplianceService:
    return SemanticComplianceService(_build_llm())


def _build_creative() -> CreativeService:
    llm = _build_llm()
    if llm is None:
        raise ValueError("OPENAI_API_KEY is not configured")
    gemini = GeminiClient(api_key=GEMINI_API_KEY, model=GEMINI_IMAGE_MODEL) if GEMINI_API_KEY else None
    return CreativeService(llm, gemini)


def _build_assets() -> AssetService:
    return AssetService(MediaClient(timeout=HTTP_TIMEOUT))


def _parse_body(event: dict) -> dict:
    # Handle SQS event format
    if "Records" in event:
        records = event["Records"]
        if not isinstance(records, list) or not records:
            raise ValueError("SQS event has no records")
        body = records[0]["body"]
    else:
        body = event.get("body", "{}")
    if isinstance(body, str):
        body = json.loads(body)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def _response(status_code: int, payload: dict) -> dict:
    return {"statusCode": status_code, "body": json.dumps(payload, ensure_ascii=False)}


def _elements_response(elements) -> dict:
    return _response(200, {"elements": [serialize_element(el) for el in elements]})


def _run_creative(action: str, body: dict, elements, fmt):
    creative = _build_creative()
    if action == "magic_build":
        print(f"Magic build: {body['brief']}", flush=True)
        return creative.magic_build(elements, fmt, body["brief"])
    if action == "write_copy":
        return creative.write_copy(
            elements, body["targetId"], body.get("product", ""), body.get("tone", "Professional"), fmt
        )
    return creative.add_generated_background(elements, fmt, body["prompt"])


def handler(event, context):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload:
    {
        "action": "audit" | "move_layer" | "build" | "magic_build" | "write_copy"
                  | "add_background" | "add_packshot" | "lep",
        "format": "story" | {"id": ..., "width": ..., "height": ..., "ratio": ...},
        "elements": [{"id": "bg-1", "type": "shape", "x": 0, ...}],
        "texts": ["optional explicit text list for audit"],
        "targetId": "...", "direction": "front" | "back",     # move_layer
        "builder": "value_tile.clubcard", "options": {...}     # build
        "brief": "...", "product": "...", "tone": "...",       # creative
        "prompt": "...", "source": "https://...",             # images
    }
    """
    try:
        body = _parse_body(event)
        action = body.get("action")
        raw_format = body.get("format", "sq")
        fmt = get_format(raw_format) if isinstance(raw_format, str) else parse_format(raw_format)
        elements = parse_elements(body.get("elements") or [])

        if action == "audit":
            texts = body.get("texts")
            if texts is None:
                texts = collect_text_contents(elements)
            print(f"Auditing {len(elements)} elements on {fmt.id}", flush=True)
            report = run_audit(elements, fmt, [str(t) for t in texts], _build_oracle())
            print(f"  score={report.score}, issues={len(report.issues)}", flush=True)
            return _response(200, serialize_report(report))

        if action == "move_layer":
            changed = move_layer(elements, body["targetId"], body.get("direction", "front"))
            changes = [{"id": el.id, "zIndex": el.z_index} for el in changed]
            return _response(200, {"changes": changes})

        if action == "build":
            return _elements_response(build(body["builder"], elements, fmt, **body.get("options", {})))

        if action == "lep":
            return _elements_response(apply_lep_template(elements, fmt, body.get("packshotImage")))

        if action == "add_packshot":
            return _elements_response(_build_assets().add_packshot(elements, fmt, body["source"]))

        if action in CREATIVE_ACTIONS:
            return _elements_response(_run_creative(action, body, elements, fmt))

        return _response(400, {"error": f"Unknown action: {action}"})

    except MediaDownloadError as e:
        return _response(502, {"error": str(e)})
    except (ValueError, KeyError, TypeError) as e:
        return _response(400, {"error": str(e)})
    except Exception as e:
        print(f"ERROR: {e}", flush=True)
        return _response(500, {"error": str(e)})
