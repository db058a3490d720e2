# materializer/generator/template.py
from dataclasses import asdict
from string import Template

from boilerplate import PAGE_TEMPLATE
from materializer.generator.palettes import get_palette
from materializer.generator.sanitizer import sanitize_prompt

FALLBACK_TITLE = "Untitled"

_template = Template(PAGE_TEMPLATE)


def generate(prompt: str, style) -> str:
    """
    Build the complete particle-field page for a prompt and style.
    Same (prompt, style) always gives the same string; raises InvalidStyle
    for a style outside the palette table.
    """
    palette = get_palette(style)
    safe_prompt = sanitize_prompt(prompt)
    if not safe_prompt.strip():
        safe_prompt = FALLBACK_TITLE
    return _template.substitute(prompt=safe_prompt, **asdict(palette))
