"""Store parsed messages next to their text with a JSON round-trip."""

from charla import parse
from charla.serialization import from_json, to_json

result = parse("gm #nostr, release notes at https://example.com/v2 :rocket:")

json_str = to_json(result)
restored = from_json(json_str)

print("Original == restored:", result == restored)
print("URLs:", restored.urls)
print("JSON length:", len(json_str), "chars")
