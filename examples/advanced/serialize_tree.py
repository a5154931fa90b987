"""Render a tree produced elsewhere: JSON in, HTML out, no parsing."""

from rstclass import parse, render
from rstclass.serialization import from_json, to_json

doc = parse("Cached\n======\n\n| This tree can be\n|   serialized and restored.")

json_str = to_json(doc, indent=2)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
print(render(restored))
