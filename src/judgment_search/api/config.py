import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")

RATE_LIMIT_STORAGE_URI = os.getenv("RATE_LIMIT_STORAGE_URI", "memory://")
SENTRY_DSN = os.getenv("SENTRY_DSN", "")
SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))
SENTRY_PROFILES_SAMPLE_RATE = float(os.getenv("SENTRY_PROFILES_SAMPLE_RATE", "0.0"))
APP_ENV = os.getenv("APP_ENV", "production")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

# Upstream judicial site
SITE_ROOT = os.getenv("SITE_ROOT", "https://www.supremecourt.gov.bd/")
WEB_BASE = os.getenv("WEB_BASE", SITE_ROOT.rstrip("/") + "/web/")
SEARCH_URL = os.getenv("SEARCH_URL", WEB_BASE + "index.php")
USER_AGENT = os.getenv(
    "UPSTREAM_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
)
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "20"))
DOCUMENT_TIMEOUT = float(os.getenv("DOCUMENT_TIMEOUT", "45"))  # judgments can be large scans

# Rendering
RENDER_SCALE = float(os.getenv("RENDER_SCALE", "1.5"))
MAX_RENDER_SCALE = float(os.getenv("MAX_RENDER_SCALE", "4.0"))

# Provenance footer
FOOTER_ATTRIBUTION = os.getenv("FOOTER_ATTRIBUTION", "(C) Copyright to Sheikh Hamza")
FOOTER_FONT_SIZE = float(os.getenv("FOOTER_FONT_SIZE", "9"))
FOOTER_X = float(os.getenv("FOOTER_X", "20"))
FOOTER_Y = float(os.getenv("FOOTER_Y", "10"))  # distance from the bottom edge

# Download naming
DOWNLOAD_PREFIX = os.getenv("DOWNLOAD_PREFIX", "Digital_BLD_Judgment")


@dataclass(frozen=True)
class SiteConfig:
    """URLs of the upstream site used for link resolution and relaying."""
    site_root: str = SITE_ROOT
    web_base: str = WEB_BASE
    search_url: str = SEARCH_URL


DEFAULT_SITE = SiteConfig()
