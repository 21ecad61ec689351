"""
Shareable query-string encoding of a ScriptRequest.

Parameter names follow the presentation layer: ``topic``, ``story``,
``aspect_ratio`` (or ``aspectRatio``), ``mood``, ``keywords`` (or
``related_keywords``) and ``language``. When several aliases are present the
first one in that order wins; for a repeated name the first value wins.
"""
from __future__ import annotations

from typing import Dict, Mapping, Sequence, Union
from urllib.parse import parse_qs, urlencode, urlsplit

from .models import ScriptRequest

DEFAULT_REQUEST = ScriptRequest(
    topic="How AI Works",
    story=(
        "Artificial intelligence is a system that learns patterns from data.\n"
        "It studies thousands of examples to understand how things relate.\n"
        "Once trained, it can recognize images, predict outcomes, or generate text.\n"
        "AI improves through repeated learning, adjusting itself each time.\n"
        "In simple terms, AI learns from experience, just like humans do."
    ),
    aspect_ratio="16:9",
    mood="calm",
    keywords="AI basics, machine learning, neural networks, technology explained, how AI works",
    language="en",
)

# Request field -> accepted query parameter names, canonical name first.
PARAM_ALIASES: Dict[str, tuple[str, ...]] = {
    "topic": ("topic",),
    "story": ("story",),
    "aspect_ratio": ("aspect_ratio", "aspectRatio"),
    "mood": ("mood",),
    "keywords": ("keywords", "related_keywords"),
    "language": ("language",),
}

ParamSource = Union[str, Mapping[str, Union[str, Sequence[str]]]]


def _first_value(value: Union[str, Sequence[str]]) -> str | None:
    if isinstance(value, str):
        return value
    return value[0] if value else None


def _as_mapping(params: ParamSource) -> Mapping[str, Union[str, Sequence[str]]]:
    if not isinstance(params, str):
        return params
    # A literal "?" is legal inside a query value; only a scheme marks a URL.
    if "://" in params.split("=", 1)[0]:
        query = urlsplit(params).query
    else:
        query = params.removeprefix("?")
    return parse_qs(query, keep_blank_values=True)


def request_from_params(params: ParamSource, base: ScriptRequest = DEFAULT_REQUEST) -> ScriptRequest:
    """
    Builds a request from query parameters, keeping ``base`` values for
    anything the parameters do not mention.

    Args:
        params: A query string, a full URL, or a mapping of names to a value or
                list of values (as returned by ``urllib.parse.parse_qs``).
        base: Request supplying values for missing parameters.

    Returns:
        A new ScriptRequest.
    """
    mapping = _as_mapping(params)
    updates: Dict[str, str] = {}
    for field, aliases in PARAM_ALIASES.items():
        for alias in aliases:
            if alias not in mapping:
                continue
            value = _first_value(mapping[alias])
            if value is not None:
                updates[field] = value
                break
    return base.model_copy(update=updates)


def request_to_params(request: ScriptRequest) -> Dict[str, str]:
    return {aliases[0]: getattr(request, field) for field, aliases in PARAM_ALIASES.items()}


def encode_query(request: ScriptRequest) -> str:
    return urlencode(request_to_params(request))


def decode_query(query: str, base: ScriptRequest = DEFAULT_REQUEST) -> ScriptRequest:
    return request_from_params(query, base=base)


def build_share_url(request: ScriptRequest, base_url: str) -> str:
    return f"{base_url}?{encode_query(request)}"
