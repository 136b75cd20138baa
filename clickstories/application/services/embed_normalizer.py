"""
Embed normalization.

Prototype embeds copied out of Figma come in a handful of shapes: design
mode instead of prototype mode, sidebars turned on, odd scaling. The
normalizer rewrites those into one canonical, interactive iframe and
leaves every other embed untouched.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

IFRAME_PATTERN = re.compile(r"<iframe\b[^>]*>", re.IGNORECASE)
SRC_PATTERN = re.compile(r"""(?<![\w-])src\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
DATA_SRC_PATTERN = re.compile(r"""\bdata-src\s*=\s*["']([^"']+)["']""", re.IGNORECASE)
BARE_URL_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)

PROTOTYPE_HOST = "figma.com"
DESIGN_SEGMENTS = ("/design/", "/file/")
PROTOTYPE_SEGMENT = "/proto/"

# Overwritten whatever the author picked
FORCED_PARAMS: Tuple[Tuple[str, str], ...] = (
    ("scaling", "contain"),
    ("content-scaling", "fixed"),
    ("show-proto-sidebar", "0"),
)
# Added only when missing
DEFAULT_PARAMS: Tuple[Tuple[str, str], ...] = (
    ("hide-ui", "1"),
    ("embed-host", "share"),
)

FIXED_SCALING_PARAM = ("content-scaling", "fixed")


@dataclass(frozen=True)
class EmbedFrame:
    width: int = 1260
    height: int = 750

    def wrap(self, url: str) -> str:
        return (
            f'<iframe width="{self.width}" height="{self.height}" '
            f'src="{url}" allowfullscreen></iframe>'
        )


def extract_embed_url(embed_code: str) -> Optional[str]:
    """Find the URL an embed points at: data-src, then src, then a bare URL."""
    if not embed_code:
        return None
    for pattern in (DATA_SRC_PATTERN, SRC_PATTERN):
        match = pattern.search(embed_code)
        if match:
            return match.group(1).strip()
    stripped = embed_code.strip()
    if BARE_URL_PATTERN.match(stripped):
        return stripped
    return None


def ensure_query_param(url: str, key: str, value: str) -> str:
    """Append ``key=value`` unless the URL already sets ``key``.

    The existing query string is kept byte-for-byte.
    """
    parts = urlsplit(url)
    if any(k == key for k, _ in parse_qsl(parts.query, keep_blank_values=True)):
        return url
    addition = urlencode([(key, value)])
    query = f"{parts.query}&{addition}" if parts.query else addition
    return urlunsplit(parts._replace(query=query))


def set_query_params(
    params: List[Tuple[str, str]],
    forced: Tuple[Tuple[str, str], ...],
    defaults: Tuple[Tuple[str, str], ...],
) -> List[Tuple[str, str]]:
    """Overwrite ``forced`` keys in place, then append missing ``defaults``."""
    result: List[Tuple[str, str]] = []
    seen = set()
    forced_values = dict(forced)
    for key, value in params:
        if key in forced_values:
            if key in seen:
                continue
            value = forced_values[key]
        seen.add(key)
        result.append((key, value))
    for key, value in (*forced, *defaults):
        if key not in seen:
            seen.add(key)
            result.append((key, value))
    return result


class EmbedNormalizer:
    """Rewrites recognized prototype embeds; passes anything else through."""

    def __init__(self, frame: Optional[EmbedFrame] = None):
        self.frame = frame or EmbedFrame()

    def is_prototype_embed(self, embed_code: str) -> bool:
        return self._prototype_url(embed_code) is not None

    def normalize(self, embed_code: str) -> str:
        if not embed_code:
            return embed_code
        url = self._prototype_url(embed_code)
        if url is None:
            return embed_code
        return self.frame.wrap(self.normalize_url(url))

    def normalize_url(self, url: str) -> str:
        parts = urlsplit(url)
        path = parts.path
        for segment in DESIGN_SEGMENTS:
            if segment in path:
                path = path.replace(segment, PROTOTYPE_SEGMENT, 1)
                break
        params = set_query_params(
            parse_qsl(parts.query, keep_blank_values=True),
            FORCED_PARAMS,
            DEFAULT_PARAMS,
        )
        return urlunsplit(
            parts._replace(path=path, query=urlencode(params, safe=":/"))
        )

    def _prototype_url(self, embed_code: str) -> Optional[str]:
        if not embed_code:
            return None
        iframe = IFRAME_PATTERN.search(embed_code)
        if iframe is None:
            return None
        src = SRC_PATTERN.search(iframe.group(0))
        if src is None:
            return None
        url = src.group(1).replace("&amp;", "&").strip()
        host = (urlsplit(url).hostname or "").lower()
        if host == PROTOTYPE_HOST or host.endswith("." + PROTOTYPE_HOST):
            return url
        return None


_default_normalizer = EmbedNormalizer()


def normalize(embed_code: str) -> str:
    """Normalize an embed with the default frame size."""
    return _default_normalizer.normalize(embed_code)
