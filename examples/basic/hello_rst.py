"""Parse and render reStructuredText in 3 lines."""

from rstclass import parse, render

doc = parse("Hello\n=====\n\nSome **strong** and *emphasized* text.")
html = render(doc)
print(html)
