"""Free-threading safe: parse 1000 messages in parallel."""

from concurrent.futures import ThreadPoolExecutor

from charla import parse

messages = [f"message {i} #batch{i % 10} https://example.com/{i}" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, messages))

print(f"Parsed {len(results)} messages in parallel")
print("First message hashtags:", results[0].hashtags)
print("Last message urls:", results[-1].urls)
