import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_BINARY_OUT = os.getenv("DEFAULT_BINARY_OUT", "output.binary.txt")
DEFAULT_HTML_OUT = os.getenv("DEFAULT_HTML_OUT", "output.html")
OUTPUT_DIR = os.getenv("OUTPUT_DIR", ".")

STYLE_NAMES = ["aurora", "ember", "lagoon"]
DEFAULT_STYLE = os.getenv("DEFAULT_STYLE", "aurora")

RULESET_NAMES = ["quality", "basic"]
DEFAULT_RULESET = os.getenv("DEFAULT_RULESET", "quality")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ALLOWED_ORIGINS = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]
