"""Render 1000 documents in parallel with one shared renderer."""

from concurrent.futures import ThreadPoolExecutor

from rstclass import RstHtml

rst = RstHtml(indent_width=2)
docs = [f"Doc {i}\n======\n\nContent for document {i}." for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(rst, docs))

print(f"Rendered {len(results)} documents in parallel")
print("First page bytes:", len(results[0]))
print("Last page bytes:", len(results[-1]))
