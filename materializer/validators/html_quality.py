# materializer/validators/html_quality.py
"""
Heuristic quality gate for decoded HTML documents.

Rules run in a fixed order and stop at the first failure. Every rule is a
case-insensitive substring test over the raw bytes; nothing is parsed.
"""

from dataclasses import dataclass
from typing import Callable, Sequence, Union

from materializer.errors import InvalidRuleset

MIN_DOCUMENT_BYTES = 1400
MIN_DEPTH_MARKERS = 2

HTML_ROOT_MARKERS = ("<!doctype html", "<html")
STYLE_MARKERS = ("<style", "style=")
LAYOUT_MARKERS = (
    "display:grid",
    "display: grid",
    "display:flex",
    "display: flex",
    "<main",
    "<section",
)
TYPE_FAMILY_MARKER = "font-family"
TYPE_DETAIL_MARKERS = ("letter-spacing", "clamp(", "text-transform", "@font-face")
DEPTH_MARKERS = (
    "gradient",
    "box-shadow",
    "backdrop-filter",
    "border-radius",
    "filter:",
    "mix-blend-mode",
    "clip-path",
    "mask-image",
)
MOTION_MARKERS = ("animation", "@keyframes", "transition", "transform")
INTERACTION_MARKERS = (
    "addEventListener",
    "onclick",
    "mousemove",
    "pointermove",
    "<button",
    ":hover",
    "<input",
)

# the older single "any one of" check
AESTHETIC_MARKERS = (
    "gradient",
    "box-shadow",
    "animation",
    "@keyframes",
    "transition",
    "transform",
    "backdrop-filter",
    "border-radius",
    "filter:",
    "font-family",
)


def _fold(data) -> bytes:
    # bytes.lower() folds ASCII letters only
    return bytes(data).lower()


def _has(folded: bytes, needle: str) -> bool:
    if not needle:
        return False
    return needle.encode("utf-8").lower() in folded


def _any_marker(folded: bytes, markers) -> bool:
    return any(_has(folded, m) for m in markers)


def _count(folded: bytes, markers) -> int:
    return sum(1 for m in markers if _has(folded, m))


def contains_nocase(haystack: bytes, needle: str) -> bool:
    """ASCII case-insensitive containment. Non-ASCII bytes compare literally."""
    return _has(_fold(haystack), needle)


def count_markers(text: bytes, markers) -> int:
    """Number of distinct markers present (not occurrences)."""
    return _count(_fold(text), markers)


@dataclass(frozen=True)
class ValidationVerdict:
    ok: bool
    reason: str = ""
    rule: str = ""  # name of the failing rule, empty on success

    def __bool__(self):
        return self.ok


@dataclass(frozen=True)
class Rule:
    name: str
    reason: str
    check: Callable[[bytes], bool]  # receives the case-folded document


QUALITY_RULES = (
    Rule(
        "min_size",
        f"decoded output is too small to be a creative UI (need at least {MIN_DOCUMENT_BYTES} bytes)",
        lambda text: len(text) >= MIN_DOCUMENT_BYTES,
    ),
    Rule(
        "html_root",
        "decoded output is not HTML (missing <html/doctype)",
        lambda text: _any_marker(text, HTML_ROOT_MARKERS),
    ),
    Rule(
        "styling",
        "decoded HTML must include styling (<style> block or style= attributes)",
        lambda text: _any_marker(text, STYLE_MARKERS),
    ),
    Rule(
        "layout",
        "decoded HTML must define a layout (grid/flex display or <main>/<section> structure)",
        lambda text: _any_marker(text, LAYOUT_MARKERS),
    ),
    Rule(
        "typography",
        "decoded HTML must set font-family plus a typographic detail (letter-spacing, clamp(), text-transform or @font-face)",
        lambda text: _has(text, TYPE_FAMILY_MARKER) and _any_marker(text, TYPE_DETAIL_MARKERS),
    ),
    Rule(
        "visual_depth",
        f"decoded HTML must use at least {MIN_DEPTH_MARKERS} visual depth techniques (e.g. gradient, box-shadow, backdrop-filter, border-radius)",
        lambda text: _count(text, DEPTH_MARKERS) >= MIN_DEPTH_MARKERS,
    ),
    Rule(
        "motion",
        "decoded HTML must include motion (animation, @keyframes, transition or transform)",
        lambda text: _any_marker(text, MOTION_MARKERS),
    ),
    Rule(
        "interaction",
        "decoded HTML must be interactive (event listeners, buttons, inputs or :hover states)",
        lambda text: _any_marker(text, INTERACTION_MARKERS),
    ),
)

BASIC_RULES = (
    QUALITY_RULES[1],
    QUALITY_RULES[2],
    Rule(
        "aesthetic_cue",
        "decoded HTML must include at least one aesthetic cue (e.g. gradient, animation, box-shadow, transition, transform)",
        lambda text: _any_marker(text, AESTHETIC_MARKERS),
    ),
)

RULESETS = {
    "quality": QUALITY_RULES,
    "basic": BASIC_RULES,
}


def resolve_ruleset(ruleset: Union[str, Sequence[Rule]]) -> Sequence[Rule]:
    if isinstance(ruleset, str):
        rules = RULESETS.get(ruleset)
        if rules is None:
            raise InvalidRuleset(ruleset)
        return rules
    return ruleset


def validate(data: bytes, ruleset: Union[str, Sequence[Rule]] = "quality") -> ValidationVerdict:
    """
    Score decoded bytes against a ruleset.
    Returns a passing verdict, or the first failing rule's reason.
    """
    rules = resolve_ruleset(ruleset)
    text = _fold(data)
    for rule in rules:
        if not rule.check(text):
            return ValidationVerdict(ok=False, reason=rule.reason, rule=rule.name)
    return ValidationVerdict(ok=True)
