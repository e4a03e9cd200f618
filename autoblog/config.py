"""Central configuration for the generate-and-publish pipeline."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
TITLES_JSON = Path(os.getenv("TITLES_JSON", ROOT_DIR / "titles.json"))
ARTICLE_OUTPUT_DIR = ROOT_DIR / "output" / "articles"

# ── API Keys ───────────────────────────────────────────────────────────────
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

# ── Sanity ────────────────────────────────────────────────────────────────
SANITY_PROJECT_ID = os.getenv("SANITY_PROJECT_ID", "")
SANITY_DATASET = os.getenv("SANITY_DATASET", "")
SANITY_API_TOKEN = os.getenv("SANITY_API_TOKEN", "")
SANITY_API_VERSION = os.getenv("SANITY_API_VERSION", "2023-05-01")
AUTHOR_ID = os.getenv("AUTHOR_ID", "d9b0383e-9d69-43e0-b193-c074a40a7443")

# ── Claude settings ────────────────────────────────────────────────────────
CLAUDE_MODEL = os.getenv("CLAUDE_MODEL", "claude-sonnet-4-5-20250929")
CLAUDE_MAX_TOKENS = 4096  # ~1000-word post plus JSON wrapper
CLAUDE_TEMPERATURE = 0.7

# ── Image settings ─────────────────────────────────────────────────────────
IMAGE_MODEL = "dall-e-3"
IMAGE_SIZE = "1024x1024"
IMAGE_ALLOWED_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")
IMAGE_MAX_MB = 5
HTTP_TIMEOUT = 60  # seconds, for image download and Sanity calls

# ── Retry settings ─────────────────────────────────────────────────────────
MAX_RETRIES = 3
RETRY_BASE_DELAY = 2.0  # seconds; 2, 3, 4.5
RETRY_BACKOFF = 1.5
RETRY_MAX_DELAY = 60.0

# ── Pipeline pacing (rate limits) ──────────────────────────────────────────
STEP_DELAY = 0.5
ARTICLE_DELAY = 2.0
FAILURE_DELAY = 1.0

# ── Article targets (used in the prompt and by validation) ─────────────────
TARGET_WORD_COUNT = (800, 1000)
SEO_TITLE_LENGTH = (40, 60)
META_DESCRIPTION_LENGTH = (140, 155)
KEYWORD_COUNT = (5, 7)
H2_COUNT = (3, 5)
