import re
from typing import Dict, List, Optional, Tuple

from .lexer import Token, tokenize_line
from .scene import DEFAULT_HEIGHT, DEFAULT_WIDTH, AccessType, Point, RawPolygon, Scene, Span

_ERROR_LOC_RE = re.compile(r"\[line (\d+), col (\d+)\]")

_ACCESS_KEYWORDS = {access.keyword: access for access in AccessType}


class Cursor:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens
        self.i = 0

    def peek(self):
        return self.toks[self.i] if self.i < len(self.toks) else None

    def match(self, *types: str):
        if self.i < len(self.toks) and self.toks[self.i][0] in types:
            t = self.toks[self.i]
            self.i += 1
            return t
        return None

    def expect(self, *types: str):
        t = self.peek()
        if t and t[0] in types:
            self.i += 1
            return t
        want = '|'.join(types)
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] expected {want}, got {t[0]}')
        raise SyntaxError(f'Unexpected end of line: expected {want}')

    def expect_end(self):
        t = self.peek()
        if t:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] unexpected trailing token {t[1]!r}')


def parse_int(cur: Cursor) -> int:
    sign = -1 if cur.match('DASH') else 1
    t = cur.expect('NUMBER')
    return sign * int(t[1])


def parse_point(cur: Cursor) -> Tuple[Point, Span]:
    lp = cur.expect('LPAREN')
    x = parse_int(cur)
    cur.expect('COMMA')
    y = parse_int(cur)
    cur.expect('RPAREN')
    return Point(x, y), Span(lp[2], lp[3])


def parse_access(cur: Cursor) -> AccessType:
    t = cur.peek()
    if t and t[0] == 'NUMBER':
        cur.i += 1
        value = int(t[1])
        if value not in {access.value for access in AccessType}:
            raise SyntaxError(f'[line {t[2]}, col {t[3]}] invalid polygon type {value}')
        return AccessType(value)
    tok = cur.expect('ID')
    access = _ACCESS_KEYWORDS.get(tok[1].lower())
    if access is None:
        raise SyntaxError(
            f"[line {tok[2]}, col {tok[3]}] invalid polygon type {tok[1]!r}, "
            f"expected one of {', '.join(_ACCESS_KEYWORDS)}"
        )
    return access


def parse_stmt(tokens: List[Token]) -> Optional[Tuple[str, Span, object]]:
    if not tokens:
        return None
    cur = Cursor(tokens)
    t0 = cur.expect('ID')
    kw = t0[1].lower()
    span = Span(t0[2], t0[3])

    if kw in ('start', 'end'):
        point, _ = parse_point(cur)
        cur.expect_end()
        return kw, span, point
    if kw == 'bounds':
        width = parse_int(cur)
        cur.match('COMMA')
        height = parse_int(cur)
        cur.expect_end()
        return kw, span, (width, height)
    if kw == 'opt':
        level = parse_int(cur)
        cur.expect_end()
        return kw, span, level
    if kw == 'polygon':
        access = parse_access(cur)
        points: List[Point] = []
        while cur.peek():
            point, _ = parse_point(cur)
            points.append(point)
        return kw, span, RawPolygon(access, tuple(points), span)
    raise SyntaxError(f'[line {t0[2]}, col {t0[3]}] unknown statement {t0[1]!r}')


def _augment_syntax_error(err: SyntaxError, line_text: str) -> Optional[SyntaxError]:
    message = str(err)
    if not line_text or "\n" in message:
        return None
    match = _ERROR_LOC_RE.search(message)
    if not match:
        return None
    col = max(int(match.group(2)), 1)
    caret_line = " " * (col - 1) + "^"
    snippet = f"    {line_text.rstrip()}\n    {caret_line}"
    return SyntaxError(f"{message}\n{snippet}")


def parse_scene(text: str) -> Scene:
    values: Dict[str, object] = {}
    spans: Dict[str, Span] = {}
    polygons: List[RawPolygon] = []

    for i, raw in enumerate(text.splitlines(), start=1):
        tokens = tokenize_line(raw, i)
        if not tokens:
            continue
        try:
            stmt = parse_stmt(tokens)
        except SyntaxError as err:
            augmented = _augment_syntax_error(err, raw)
            if augmented is None:
                raise
            raise augmented from None
        if not stmt:
            continue
        kind, span, value = stmt
        if kind == 'polygon':
            polygons.append(value)  # type: ignore[arg-type]
            continue
        if kind in values:
            raise SyntaxError(f'[line {span.line}, col {span.col}] duplicate {kind} statement')
        values[kind] = value
        spans[kind] = span

    for required in ('start', 'end'):
        if required not in values:
            raise SyntaxError(f'scene has no {required} point')

    width, height = values.get('bounds', (DEFAULT_WIDTH, DEFAULT_HEIGHT))  # type: ignore[misc]
    return Scene(
        start=values['start'],  # type: ignore[arg-type]
        end=values['end'],  # type: ignore[arg-type]
        polygons=polygons,
        width=width,
        height=height,
        opt=values.get('opt', 1),  # type: ignore[arg-type]
        spans=spans,
    )
