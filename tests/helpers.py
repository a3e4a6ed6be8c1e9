NESTED_BODY = """START
{{content: it, en}}IT, EN{{/content}}
{{content: *, !en, !it, !es, !fr}}MIDDLE{{/content}}
{{content: !it}}
  {{content: !es}}!IT and !ES{{/content}}
  {{content: en}}EN in !IT{{/content}}

  !IT
{{/content}}
{{content: !*}}END{{/content}}
"""

SAMPLE_METADATA = """title: "OK"
locales:
  - it
  - en
more:
  it: "Continua"
  en: "Continue"
other:
  status: "OK"
"""

SAMPLE_BODY = """This is a content.

{{content: en}}
Optionally I'm filtered only for English.
{{/content}}
"""


def lines(text: str) -> list[str]:
    """Non-blank stripped lines of text."""
    return [l.strip() for l in text.split("\n") if l.strip()]
