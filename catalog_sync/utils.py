from concurrent.futures import ThreadPoolExecutor
from pathlib import PurePosixPath
from typing import Any, Callable, Iterable, TypeVar
from urllib.parse import unquote, urlparse

T = TypeVar("T")
R = TypeVar("R")


def regular_price(price_minor: int) -> float:
    """Convert a listing price in minor units to the published price.

    Minor units to major units, plus a flat markup of 100.

    Example: 500 -> 105.0
    """
    return price_minor / 100 + 100


def format_price(price: float) -> str:
    """Render a price without a trailing ".0": 105.0 -> "105", 119.99 -> "119.99"."""
    if float(price).is_integer():
        return str(int(price))
    return repr(float(price))


def basename_from_url(url: str) -> str:
    """Return the last path segment of a URL, ignoring query and fragment.

    Example: "https://cdn.site.com/img/mug-1.jpg?w=800" -> "mug-1.jpg"
    """
    name = PurePosixPath(unquote(urlparse(url).path)).name
    if not name:
        raise ValueError(f"URL has no file name: {url}")
    return name


def to_form_pairs(data: Any, prefix: str = "") -> list[tuple[str, str]]:
    """Flatten nested dicts/lists to form fields in bracket notation.

    Example: {"meta_data": [{"key": "original"}]} -> [("meta_data[0][key]", "original")]
    """
    pairs: list[tuple[str, str]] = []
    if isinstance(data, dict):
        for key, value in data.items():
            name = f"{prefix}[{key}]" if prefix else str(key)
            pairs.extend(to_form_pairs(value, name))
    elif isinstance(data, (list, tuple)):
        for i, value in enumerate(data):
            pairs.extend(to_form_pairs(value, f"{prefix}[{i}]"))
    elif isinstance(data, bool):
        pairs.append((prefix, "true" if data else "false"))
    elif data is None:
        pairs.append((prefix, ""))
    else:
        pairs.append((prefix, str(data)))
    return pairs


def ordered_map(fn: Callable[[T], R], items: Iterable[T], max_workers: int = 1) -> list[R]:
    """Apply fn to every item, returning results in input order.

    With max_workers > 1 the calls run on a thread pool; completion order
    does not affect result order. The first exception is re-raised.
    """
    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as executor:
        return list(executor.map(fn, items))
