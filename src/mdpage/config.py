import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

DOCUMENT_PATH = PACKAGE_DIR / "lib" / "post.md"
DOCUMENT_ENCODING = "utf-8"

TEMPLATES_PATH = PACKAGE_DIR / "templates"
PAGE_TEMPLATE = "page.html"

LOG_LEVEL = os.getenv("MDPAGE_LOG_LEVEL", "INFO").upper()
