# materializer/pipeline.py
"""
End-to-end flows built on the pure core:

  materialize:  binary text -> decode -> require content -> validate -> write files
  generate:     prompt + style -> HTML -> binary text -> optionally write files

Artifacts are written with write_file_bytes. Nothing here retries; every
error goes straight back to the caller.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from materializer.codec.binary_text import decode, encode
from materializer.errors import EmptyInputError
from materializer.generator.template import generate
from materializer.validators.html_quality import ValidationVerdict, validate

logger = logging.getLogger(__name__)


@dataclass
class MaterializeResult:
    verdict: ValidationVerdict
    binary_bytes: int                 # size of the binary text as received
    html_bytes: int                   # size of the decoded document
    binary_out: Optional[str] = None  # only set when files were written
    html_out: Optional[str] = None

    @property
    def written(self) -> bool:
        return self.html_out is not None


@dataclass
class GenerationResult:
    html: str
    binary_text: str
    binary_out: Optional[str] = None
    html_out: Optional[str] = None


# ─── Files ───────────────────────────────────────────────────────────────────

def write_file_bytes(path, data: bytes) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


# ─── Flows ───────────────────────────────────────────────────────────────────

def decode_document(binary_text) -> bytes:
    decoded = decode(binary_text)
    if not decoded:
        raise EmptyInputError()
    return decoded


def materialize(binary_text, binary_out, html_out, ruleset="quality") -> MaterializeResult:
    if isinstance(binary_text, str):
        binary_text = binary_text.encode("utf-8")

    decoded = decode_document(binary_text)
    verdict = validate(decoded, ruleset)
    result = MaterializeResult(
        verdict=verdict,
        binary_bytes=len(binary_text),
        html_bytes=len(decoded),
    )

    if not verdict.ok:
        logger.warning(f"[MATERIALIZE] rejected decoded program ({verdict.rule}): {verdict.reason}")
        return result

    write_file_bytes(binary_out, binary_text)
    write_file_bytes(html_out, decoded)
    result.binary_out = str(binary_out)
    result.html_out = str(html_out)

    logger.info(
        f"[MATERIALIZE] binary: {binary_out} ({result.binary_bytes} bytes), "
        f"html: {html_out} ({result.html_bytes} bytes)"
    )
    return result


def generate_binary(prompt: str, style, binary_out=None, html_out=None) -> GenerationResult:
    html = generate(prompt, style)
    result = GenerationResult(html=html, binary_text=encode(html.encode("utf-8")))

    if binary_out:
        write_file_bytes(binary_out, result.binary_text.encode("ascii"))
        result.binary_out = str(binary_out)
    if html_out:
        write_file_bytes(html_out, html.encode("utf-8"))
        result.html_out = str(html_out)

    logger.info(f"[GENERATE] style={getattr(style, 'value', style)} html={len(html)} chars")
    return result
