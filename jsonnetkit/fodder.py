"""Fodder: whitespace and comments kept so that source can be round tripped."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum


class FodderKind(Enum):
    LINE_END = 0
    INTERSTITIAL = 1
    PARAGRAPH = 2


@dataclass(frozen=True)
class FodderElement:
    """A single piece of fodder."""

    kind: FodderKind
    blanks: int = 0
    indent: int = 0
    comment: tuple[str, ...] = ()


Fodder = list[FodderElement]


def make_fodder_element(
    kind: FodderKind, blanks: int, indent: int, comment: Iterable[str]
) -> FodderElement:
    """Create a fodder element, checking the constraints of its kind."""
    comment = tuple(comment)
    if kind is FodderKind.LINE_END and len(comment) > 1:
        raise ValueError(f"FodderLineEnd but comment == {list(comment)}.")
    if kind is FodderKind.INTERSTITIAL:
        if blanks > 0:
            raise ValueError(f"FodderInterstitial but blanks == {blanks}")
        if indent > 0:
            raise ValueError(f"FodderInterstitial but indent == {indent}")
        if len(comment) != 1:
            raise ValueError(f"FodderInterstitial but comment == {list(comment)}.")
    if kind is FodderKind.PARAGRAPH and not comment:
        raise ValueError("FodderParagraph but comment was empty")
    return FodderElement(kind=kind, blanks=blanks, indent=indent, comment=comment)


def has_clean_endline(fodder: Fodder) -> bool:
    """True if the fodder is non-empty and doesn't end with an interstitial."""
    return bool(fodder) and fodder[-1].kind is not FodderKind.INTERSTITIAL


def fodder_append(fodder: Fodder, elem: FodderElement) -> None:
    """Append ``elem`` to ``fodder`` in place, preserving its constraints."""
    if has_clean_endline(fodder) and elem.kind is FodderKind.LINE_END:
        if elem.comment:
            # A line end with a comment becomes a single-line paragraph.
            fodder.append(
                make_fodder_element(FodderKind.PARAGRAPH, elem.blanks, elem.indent, elem.comment)
            )
        else:
            back = fodder[-1]
            fodder[-1] = replace(back, indent=elem.indent, blanks=back.blanks + elem.blanks)
        return
    if not has_clean_endline(fodder) and elem.kind is FodderKind.PARAGRAPH:
        fodder.append(make_fodder_element(FodderKind.LINE_END, 0, elem.indent, ()))
    fodder.append(elem)


def fodder_concat(a: Fodder, b: Fodder) -> Fodder:
    """A new fodder holding ``a`` then ``b``, preserving constraints."""
    result = list(a)
    if not b:
        return result
    if not a:
        return list(b)
    fodder_append(result, b[0])
    result.extend(b[1:])
    return result


def fodder_move_front(a: Fodder, b: Fodder) -> None:
    """Move the contents of ``b`` to the front of ``a``, emptying ``b``."""
    a[:] = fodder_concat(b, a)
    b.clear()


def ensure_clean_newline(fodder: Fodder) -> None:
    """Add a line end to ``fodder`` if it does not end cleanly."""
    if not has_clean_endline(fodder):
        fodder_append(fodder, make_fodder_element(FodderKind.LINE_END, 0, 0, ()))


def count_element_newlines(elem: FodderElement) -> int:
    """The number of newline characters the element stands for."""
    if elem.kind is FodderKind.INTERSTITIAL:
        return 0
    if elem.kind is FodderKind.LINE_END:
        return 1
    if elem.kind is FodderKind.PARAGRAPH:
        return len(elem.comment) + elem.blanks
    raise ValueError(f"Unknown FodderElement kind {elem.kind}")


def count_newlines(fodder: Iterable[FodderElement]) -> int:
    """The number of newline characters the fodder stands for."""
    return sum(count_element_newlines(elem) for elem in fodder)