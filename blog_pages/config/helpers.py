"""Utility helpers shared by the blog configuration loader."""

from __future__ import annotations

import typing as typ

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_link_mapping(
    section: str, payload: typ.Mapping[str, object] | None
) -> dict[str, str]:
    """Return an ordered label to target mapping from a YAML link table.

    The YAML mapping order is kept as-is; labels and targets must both be
    non-empty.
    """
    match payload:
        case None:
            return {}
        case dict() as data:
            pass
        case _:
            msg = f"'{section}' must be a mapping of label to target."
            raise SiteConfigError(msg)
    links: dict[str, str] = {}
    for label, target in data.items():
        label_text = _optional_str(label)
        target_text = _optional_str(target)
        if not label_text or not target_text:
            msg = f"'{section}' entries require a label and a target."
            raise SiteConfigError(msg)
        links[label_text] = target_text
    return links


def _coerce_positive_float(section: str, value: object, default: float) -> float:
    """Return ``value`` as a positive float, or ``default`` when unset."""
    if value is None:
        return default
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"'{section}' must be a number, got {value!r}."
        raise SiteConfigError(msg) from exc
    if number <= 0:
        msg = f"'{section}' must be positive, got {value!r}."
        raise SiteConfigError(msg)
    return number


def _optional_year(value: object) -> int | None:
    """Return ``value`` as a year, or None when unset."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | str):
        msg = f"'copyright_year' must be an integer, got {value!r}."
        raise SiteConfigError(msg)
    try:
        return int(value)
    except ValueError as exc:
        msg = f"'copyright_year' must be an integer, got {value!r}."
        raise SiteConfigError(msg) from exc


__all__ = [
    "_build_link_mapping",
    "_coerce_positive_float",
    "_optional_str",
    "_optional_year",
]
