"""Key resolution, paths, constants, and setup wizard."""

import json
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

# ─────────────────────────────────────────────────────
# Home directory — config and logs live here
# ─────────────────────────────────────────────────────
POSTSMITH_DIR = Path.home() / ".postsmith"
LOGS_DIR = POSTSMITH_DIR / "logs"
CONFIG_FILE = POSTSMITH_DIR / "config.json"

STYLE_CORPUS_FILE = Path(__file__).resolve().parent / "style_corpus.json"

# ─────────────────────────────────────────────────────
# Trending constants — override via config.json "trending"
# ─────────────────────────────────────────────────────
TRENDING_TTL_SECONDS = 10 * 60
TRENDING_TIMEOUT_SECONDS = 15.0

MAX_HASHTAGS = 30
MAX_TOPICS = 20
MAX_EVENTS = 15

TOPIC_MAX_CHARS = 60
EVENT_MAX_CHARS = 100

USER_AGENT = "postsmith/1.0"

CLAUDE_MODEL = os.environ.get("POSTSMITH_MODEL", "claude-sonnet-4-6")


# ─────────────────────────────────────────────────────
# Utilities
# ─────────────────────────────────────────────────────
def write_secret_file(path: Path, content: str):
    """Write a file with 0600 permissions (owner read/write only)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        f.write(content)


# ─────────────────────────────────────────────────────
# API key resolution — env → config.json
# ─────────────────────────────────────────────────────
def _get_key(name: str) -> str:
    """Resolve an API key: environment variable first, then config.json."""
    val = os.environ.get(name)
    if val:
        return val
    val = load_config().get(name)
    if isinstance(val, str) and val:
        return val
    return ""


def get_news_api_key() -> str:
    return _get_key("NEWS_API_KEY")


def get_anthropic_key() -> str:
    return _get_key("ANTHROPIC_API_KEY")


def load_config() -> dict:
    """Load the full config.json, including trending_sources."""
    if CONFIG_FILE.exists():
        try:
            data = json.loads(CONFIG_FILE.read_text())
        except (OSError, ValueError):
            return {}
        if isinstance(data, dict):
            return data
    return {}


def save_config(config: dict):
    """Save config.json with restricted permissions."""
    POSTSMITH_DIR.mkdir(parents=True, exist_ok=True)
    write_secret_file(CONFIG_FILE, json.dumps(config, indent=2))


def _positive_float(section: dict, key: str, default: float) -> float:
    if key not in section:
        return default
    try:
        value = float(section[key])
    except (TypeError, ValueError):
        value = None
    if value is None or not value > 0:
        logging.getLogger("postsmith").warning(
            "Ignoring invalid trending.%s=%r in %s, using %s", key, section[key], CONFIG_FILE, default
        )
        return default
    return value


def get_trending_settings(config: dict | None = None) -> dict:
    """Cache TTL and per-pass timeout, with valid config.json overrides applied."""
    config = load_config() if config is None else config
    section = config.get("trending", {})
    if not isinstance(section, dict):
        section = {}
    return {
        "ttl_seconds": _positive_float(section, "ttl_seconds", float(TRENDING_TTL_SECONDS)),
        "timeout_seconds": _positive_float(section, "timeout_seconds", TRENDING_TIMEOUT_SECONDS),
    }


# ─────────────────────────────────────────────────────
# Claude backends — API key or `claude` CLI
# ─────────────────────────────────────────────────────
def has_claude_cli() -> bool:
    return shutil.which("claude") is not None


def call_claude_cli(prompt: str, model: str = CLAUDE_MODEL) -> str:
    """Call Claude via the `claude` CLI in non-interactive mode."""
    claude_path = shutil.which("claude")
    if not claude_path:
        raise RuntimeError("claude CLI not found. Install it or set ANTHROPIC_API_KEY.")

    r = subprocess.run(
        [claude_path, "--print", "--model", model, "-p", prompt],
        capture_output=True,
        text=True,
        timeout=120,
    )
    if r.returncode != 0:
        raise RuntimeError(f"claude CLI failed: {r.stderr[:300]}")
    return r.stdout.strip()


def get_anthropic_client():
    """Create an Anthropic client if an API key is available, else None."""
    import anthropic

    api_key = get_anthropic_key()
    if api_key:
        return anthropic.Anthropic(api_key=api_key)
    return None


def get_claude_backend() -> str:
    """Return "api" if ANTHROPIC_API_KEY is set, "cli" if the claude CLI exists."""
    if get_anthropic_key():
        return "api"
    if has_claude_cli():
        return "cli"
    raise RuntimeError(
        "No Claude access found. Either:\n"
        "  1. Set ANTHROPIC_API_KEY in env or ~/.postsmith/config.json\n"
        "  2. Install the claude CLI and log in"
    )


# ─────────────────────────────────────────────────────
# Interactive setup
# ─────────────────────────────────────────────────────
def run_setup():
    """Interactive setup — saves API keys to config.json."""
    print("\n" + "=" * 60)
    print("  postsmith — Setup")
    print("=" * 60)
    print("\nKeys are saved to ~/.postsmith/config.json\n")

    config = load_config()

    print("1. Anthropic API key (used for content generation)")
    print("   Get yours at: https://console.anthropic.com/settings/keys")
    key = input("   ANTHROPIC_API_KEY (press Enter to skip): ").strip()
    if key:
        config["ANTHROPIC_API_KEY"] = key

    print("\n2. NewsAPI key (optional — enables headline trends)")
    print("   Get yours at: https://newsapi.org/register")
    key = input("   NEWS_API_KEY (press Enter to skip): ").strip()
    if key:
        config["NEWS_API_KEY"] = key

    save_config(config)
    print(f"\n  Config saved to {CONFIG_FILE}\n")
    sys.exit(0)
