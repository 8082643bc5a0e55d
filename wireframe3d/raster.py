"""Scan-line filling of 2D triangles."""

from __future__ import annotations

from typing import Iterator, NamedTuple


class Span(NamedTuple):
    """A horizontal run of pixels on row ``y`` from ``x_start`` to ``x_end``."""

    y: int
    x_start: int
    x_end: int


def _direction(delta: int) -> tuple[int, int]:
    return (-delta, -1) if delta < 0 else (delta, 1)


def fill_triangle(x1, y1, x2, y2, x3, y3) -> Iterator[Span]:
    """Yield the horizontal spans that fill the triangle, top row first.

    Coordinates are truncated to integers.
    """
    x1, y1, x2, y2, x3, y3 = (int(v) for v in (x1, y1, x2, y2, x3, y3))

    if y1 > y2:
        y1, y2, x1, x2 = y2, y1, x2, x1
    if y1 > y3:
        y1, y3, x1, x3 = y3, y1, x3, x1
    if y2 > y3:
        y2, y3, x2, x3 = y3, y2, x3, x2

    t1x = t2x = x1
    y = y1
    dx1, signx1 = _direction(x2 - x1)
    dy1 = y2 - y1
    dx2, signx2 = _direction(x3 - x1)
    dy2 = y3 - y1

    changed1 = changed2 = False
    if dy1 > dx1:
        dx1, dy1 = dy1, dx1
        changed1 = True
    if dy2 > dx2:
        dx2, dy2 = dy2, dx2
        changed2 = True

    e2 = dx2 >> 1

    if y1 != y2:
        e1 = dx1 >> 1
        i = 0
        while i < dx1:
            t1xp = t2xp = 0
            minx, maxx = min(t1x, t2x), max(t1x, t2x)

            # First edge: advance until the row is about to change.
            while i < dx1:
                i += 1
                e1 += dy1
                row_done = False
                while e1 >= dx1:
                    e1 -= dx1
                    if changed1:
                        t1xp = signx1
                    else:
                        row_done = True
                        break
                if row_done or changed1:
                    break
                t1x += signx1

            # Second edge.
            while True:
                e2 += dy2
                row_done = False
                while e2 >= dx2:
                    e2 -= dx2
                    if changed2:
                        t2xp = signx2
                    else:
                        row_done = True
                        break
                if row_done or changed2:
                    break
                t2x += signx2

            yield Span(y, min(minx, t1x, t2x), max(maxx, t1x, t2x))

            if not changed1:
                t1x += signx1
            t1x += t1xp
            if not changed2:
                t2x += signx2
            t2x += t2xp
            y += 1
            if y == y2:
                break

    # Second half, from the middle vertex down.
    dx1, signx1 = _direction(x3 - x2)
    dy1 = y3 - y2
    t1x = x2
    if dy1 > dx1:
        dx1, dy1 = dy1, dx1
        changed1 = True
    else:
        changed1 = False

    e1 = dx1 >> 1
    i = 0
    while i <= dx1:
        t1xp = t2xp = 0
        minx, maxx = min(t1x, t2x), max(t1x, t2x)

        while i < dx1:
            e1 += dy1
            row_done = False
            if e1 >= dx1:
                e1 -= dx1
                if changed1:
                    t1xp = signx1
                else:
                    row_done = True
            if row_done or changed1:
                break
            t1x += signx1
            if i < dx1:
                i += 1

        while t2x != x3:
            e2 += dy2
            row_done = False
            while e2 >= dx2:
                e2 -= dx2
                if changed2:
                    t2xp = signx2
                else:
                    row_done = True
                    break
            if row_done or changed2:
                break
            t2x += signx2

        yield Span(y, min(minx, t1x, t2x), max(maxx, t1x, t2x))

        if not changed1:
            t1x += signx1
        t1x += t1xp
        if not changed2:
            t2x += signx2
        t2x += t2xp
        y += 1
        if y > y3:
            return
        i += 1