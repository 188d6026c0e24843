"""Write compact glyph SVG markup and its embeddable data URL form."""

from __future__ import annotations

import html
from typing import Any
from urllib.parse import quote

import numpy as np
from numpy.typing import NDArray

SVG_NS = "http://www.w3.org/2000/svg"
DATA_URL_PREFIX = "data:image/svg+xml;utf8,"

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def fmt_size(value: float) -> str:
    """Integral sizes print without a trailing .0."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def path_from(points: NDArray[np.float64], closed: bool = False) -> str:
    """``M x y L x y ...`` with 2-decimal coordinates."""
    parts = [
        f"{'M' if i == 0 else 'L'}{x:.2f} {y:.2f}"
        for i, (x, y) in enumerate(np.asarray(points, dtype=np.float64).reshape(-1, 2))
    ]
    d = " ".join(parts)
    return d + " Z" if closed and d else d


def segments_path(segments: NDArray[np.float64]) -> str:
    """Disjoint ``M L`` pairs with 1-decimal coordinates."""
    return " ".join(
        f"M{x1:.1f} {y1:.1f} L{x2:.1f} {y2:.1f}"
        for (x1, y1), (x2, y2) in np.asarray(segments, dtype=np.float64).reshape(-1, 2, 2)
    )


def serialize_svg(
    elements: list[dict[str, Any]],
    size: float = 128.0,
) -> str:
    """Generate compact single-line SVG markup from element definitions."""
    s = fmt_size(size)
    parts = [
        f'<svg xmlns="{SVG_NS}" viewBox="0 0 {s} {s}" width="{s}" height="{s}"'
        ' shape-rendering="geometricPrecision">'
    ]
    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{html.escape(str(v), quote=True)}"' for k, v in attrs.items())
        parts.append(f"<{tag} {attr_str}/>")
    parts.append("</svg>")
    return "".join(parts)


def encode_as_embeddable(svg: str) -> str:
    """Percent-encode markup (as encodeURIComponent) behind an SVG data URL prefix."""
    return DATA_URL_PREFIX + quote(svg, safe=_URI_COMPONENT_SAFE)
