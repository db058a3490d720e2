# main.py
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import (
    ALLOWED_ORIGINS,
    DEFAULT_BINARY_OUT,
    DEFAULT_HTML_OUT,
    DEFAULT_RULESET,
    DEFAULT_STYLE,
    LOG_LEVEL,
    OUTPUT_DIR,
)
from materializer.codec.binary_text import decode, encode
from materializer.errors import MaterializerError
from materializer.generator.sanitizer import sanitize_prompt
from materializer.pipeline import decode_document, generate_binary, materialize
from materializer.validators.html_quality import validate

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Binary Page Materializer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EncodeRequest(BaseModel):
    content: str


class BinaryRequest(BaseModel):
    binary: str


class ValidateRequest(BaseModel):
    binary: str
    ruleset: str = DEFAULT_RULESET


class GenerateRequest(BaseModel):
    prompt: str
    style: str = DEFAULT_STYLE
    include_html: bool = False


class SanitizeRequest(BaseModel):
    prompt: str


class MaterializeRequest(BaseModel):
    binary: str
    ruleset: str = DEFAULT_RULESET
    binary_out: str = DEFAULT_BINARY_OUT
    html_out: str = DEFAULT_HTML_OUT


def _bad_request(e: MaterializerError) -> HTTPException:
    logger.info(f"[API] rejected request: {e}")
    return HTTPException(status_code=400, detail=str(e))


def _output_path(name: str) -> Path:
    # artifact names are resolved inside OUTPUT_DIR only
    base = Path(name).name
    if base in ("", ".", ".."):
        logger.info(f"[API] rejected artifact name: {name!r}")
        raise HTTPException(status_code=400, detail=f"invalid artifact name: {name!r}")
    return Path(OUTPUT_DIR) / base


@app.get("/")
def health():
    return {"status": "ok", "service": "binary-page-materializer"}


@app.post("/encode")
def encode_content(req: EncodeRequest):
    data = req.content.encode("utf-8")
    return {"binary": encode(data), "byte_length": len(data)}


@app.post("/decode")
def decode_binary(req: BinaryRequest):
    try:
        data = decode(req.binary)
    except MaterializerError as e:
        raise _bad_request(e)
    return {"content": data.decode("utf-8", errors="replace"), "byte_length": len(data)}


@app.post("/validate")
def validate_binary(req: ValidateRequest):
    """
    Decode and score a binary document without writing anything.
    A failed verdict is a normal 200 response with valid=false.
    """
    try:
        decoded = decode_document(req.binary)
        verdict = validate(decoded, req.ruleset)
    except MaterializerError as e:
        raise _bad_request(e)
    return {
        "valid": verdict.ok,
        "reason": verdict.reason,
        "rule": verdict.rule,
        "byte_length": len(decoded),
    }


@app.post("/generate")
def generate_page(req: GenerateRequest):
    try:
        result = generate_binary(req.prompt, req.style)
    except MaterializerError as e:
        raise _bad_request(e)

    body = {"binary": result.binary_text, "byte_length": len(result.html.encode("utf-8"))}
    if req.include_html:
        body["html"] = result.html
    return body


@app.post("/sanitize")
def sanitize(req: SanitizeRequest):
    return {"prompt": sanitize_prompt(req.prompt)}


@app.post("/materialize")
def materialize_binary(req: MaterializeRequest):
    binary_out = _output_path(req.binary_out)
    html_out = _output_path(req.html_out)
    if binary_out == html_out:
        raise HTTPException(
            status_code=400,
            detail=f"binary_out and html_out must name different files (both resolve to {binary_out.name})",
        )

    try:
        result = materialize(req.binary, binary_out=binary_out, html_out=html_out, ruleset=req.ruleset)
    except MaterializerError as e:
        raise _bad_request(e)
    except OSError as e:
        logger.error(f"[API] could not write artifacts: {e}")
        raise HTTPException(status_code=500, detail=f"could not write artifacts: {e}")

    if not result.verdict.ok:
        raise HTTPException(
            status_code=422,
            detail=f"rejected decoded program: {result.verdict.reason}",
        )

    return {
        "status": "materialized",
        "binary_out": result.binary_out,
        "binary_bytes": result.binary_bytes,
        "html_out": result.html_out,
        "html_bytes": result.html_bytes,
    }
