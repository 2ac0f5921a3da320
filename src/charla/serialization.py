"""Token serialization: JSON round-trip for tokens and parse results.

Converts typed tokens and ParseResult objects to/from JSON-compatible dicts.
Useful for:
- Storing parsed messages next to their raw text
- Handing token streams to a UI process over the wire
- Debugging and inspection

Tokens are tagged with their wire kind name in ``_type`` (``"url"``,
``"nostr_npub"``, ...); a result is tagged ``"ParseResult"``.
All output is deterministic (sorted keys).

Example:
    from charla import parse
    from charla.serialization import to_json, from_json

    result = parse("gm #nostr :coffee:")
    restored = from_json(to_json(result))
    assert restored == result

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from charla.result import ParseResult
from charla.tokens import (
    CodeBlock,
    Emoji,
    Hashtag,
    InlineCode,
    Mention,
    Newline,
    NostrNaddr,
    NostrNevent,
    NostrNote,
    NostrNprofile,
    NostrNpub,
    Text,
    Token,
    Url,
)

_RESULT_TYPE = "ParseResult"

# Registry of wire kind names to token classes for deserialization
_TOKEN_TYPES: dict[str, type[Token]] = {
    cls.kind.value: cls
    for cls in (
        Text,
        Url,
        Mention,
        Hashtag,
        NostrNpub,
        NostrNote,
        NostrNevent,
        NostrNprofile,
        NostrNaddr,
        Emoji,
        CodeBlock,
        InlineCode,
        Newline,
    )
}


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Includes a ``_type`` discriminator holding the token kind's wire name.

    Args:
        token: Any Charla token.

    Returns:
        Dict with ``_type`` and all token fields.

    """
    result: dict[str, Any] = {"_type": token.kind.value}
    for f in fields(token):
        result[f.name] = getattr(token, f.name)
    return result


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a typed token from a dict.

    Unknown keys are ignored; missing optional fields take their defaults.

    Args:
        data: Dict with ``_type`` and token fields (as produced by token_to_dict).

    Returns:
        Typed token (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized token"
        raise ValueError(msg)

    token_cls = _TOKEN_TYPES.get(type_name)
    if token_cls is None:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg)

    kwargs = {f.name: data[f.name] for f in fields(token_cls) if f.name in data}
    return token_cls(**kwargs)


def to_dict(result: ParseResult) -> dict[str, Any]:
    """Convert a ParseResult to a JSON-compatible dict.

    Args:
        result: Parse result to serialize.

    Returns:
        Dict with ``_type`` set to ``"ParseResult"``, the serialized tokens
        and the summary fields.

    """
    data: dict[str, Any] = {"_type": _RESULT_TYPE}
    for f in fields(result):
        value = getattr(result, f.name)
        if f.name == "tokens":
            data[f.name] = [token_to_dict(token) for token in value]
        elif isinstance(value, tuple):
            data[f.name] = list(value)
        else:
            data[f.name] = value
    return data


def from_dict(data: dict[str, Any]) -> ParseResult:
    """Reconstruct a ParseResult from a dict.

    Args:
        data: Dict as produced by to_dict.

    Returns:
        ParseResult with typed tokens.

    Raises:
        ValueError: If the dict does not describe a ParseResult or holds
            an unknown token type.

    """
    type_name = data.get("_type")
    if type_name != _RESULT_TYPE:
        msg = f"Expected {_RESULT_TYPE}, got {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(ParseResult):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name == "tokens":
            kwargs[f.name] = tuple(token_from_dict(item) for item in value)
        elif isinstance(value, list):
            kwargs[f.name] = tuple(value)
        else:
            kwargs[f.name] = value
    return ParseResult(**kwargs)


def to_json(result: ParseResult, *, indent: int | None = None) -> str:
    """Serialize a ParseResult to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        result: Parse result to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> ParseResult:
    """Deserialize a ParseResult from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        ParseResult.

    Raises:
        ValueError: If the JSON doesn't represent a ParseResult.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
