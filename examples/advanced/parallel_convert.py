"""Thread safe: one shared Markdown converter, 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from marklet import Markdown

md = Markdown()
docs = ["# Doc " + str(i) + "\n\n- item\n- item\nContent for document " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(md, docs))

print(f"Converted {len(results)} documents in parallel")
print("First doc:", results[0])
