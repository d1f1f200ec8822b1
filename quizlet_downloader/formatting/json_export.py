"""JSON output."""

import json

from ..scrape.models import ExtractionResult
from .normalize import clean_string


def build_json_payload(result: ExtractionResult, include_images: bool = True) -> dict:
    """
    Deep-copied, re-cleaned payload ready for ``json.dumps``.

    Field names and order are fixed; only ``info.swapped`` reflects the swap
    flag. With images off the ``image`` field is blanked, not removed.
    """
    payload = result.model_dump()

    for key, value in payload["info"].items():
        payload["info"][key] = clean_string(value)

    for record in payload["quizData"].values():
        record["termPart"] = clean_string(record["termPart"])
        definition = record["definitionPart"]
        definition["text"] = clean_string(definition["text"])
        definition["image"] = clean_string(definition["image"]) if include_images else ""

    return payload


def generate_json(result: ExtractionResult, include_images: bool = True) -> str:
    return json.dumps(build_json_payload(result, include_images), indent=4, ensure_ascii=False)
