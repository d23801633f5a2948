from importlib.resources import files

from .core import format_dhms, format_ns, format_wdhms
from .util import DAY, HOUR, MINUTE, MS, NANOS, NS, SECOND, U64_MAX, US, WEEK

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "format_dhms",
    "format_wdhms",
    "format_ns",
    "NS",
    "US",
    "MS",
    "NANOS",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "U64_MAX",
    "docs",
]
