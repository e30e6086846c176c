# -*- test-case-name: parsezone.test.test_diagnostics -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Failure traces and their rendering.

A trace is a list of L{TraceEntry}, innermost first: the first entry says
what the grammar expected at the token where it gave up, and the following
entries name the enclosing grammar contexts ("TTL", "Resource Data", ...).
"""

from twisted.python import util as tputil

from parsezone.zone.tokens import WORD


EXPECTED = 'expected'
CONTEXT = 'context'
EXTERNAL = 'external'



class TraceEntry(tputil.FancyEqMixin, tputil.FancyStrMixin):
    """
    One step of a failure trace.

    @ivar remaining: The L{TokenSequence} left at the point of failure; its
        first token, if any, is the offending one.
    @ivar kind: L{EXPECTED}, L{CONTEXT} or L{EXTERNAL}.
    @ivar detail: For L{EXPECTED} the literal or token kind that was wanted,
        for L{CONTEXT} the name of the grammar context, and for L{EXTERNAL}
        the message of the conversion error.
    """
    compareAttributes = ('position', 'kind', 'detail')
    showAttributes = ('position', 'kind', 'detail')

    def __init__(self, remaining, kind, detail):
        self.remaining = remaining
        self.kind = kind
        self.detail = detail


    @property
    def position(self):
        """
        Index of the offending token in the full token sequence.
        """
        if self.remaining is None:
            return -1
        return self.remaining.offset



def expected(remaining, what):
    return TraceEntry(remaining, EXPECTED, what)


def context(remaining, name):
    return TraceEntry(remaining, CONTEXT, name)


def external(remaining, message):
    return TraceEntry(remaining, EXTERNAL, message)



def caret(lineText, column):
    """
    Build a line with a C{^} under C{column} of C{lineText}.

    Tabs before the column are copied so the caret lines up however wide
    the terminal renders them.
    """
    prefix = lineText[:column - 1]
    pad = ''.join('\t' if c == '\t' else ' ' for c in prefix)
    pad += ' ' * (column - 1 - len(prefix))
    return pad + '^'



def _emptyInput(i, entry):
    if entry.kind == EXPECTED:
        return "%d: expected '%s', got empty input\n\n" % (i, entry.detail)
    if entry.kind == EXTERNAL:
        return "%d: %s, got empty input\n\n" % (i, entry.detail)
    return "%d: in %s, got empty input\n\n" % (i, entry.detail)


def _header(i, lineNumber, entry):
    if entry.kind == EXPECTED:
        return "%d: at line %d:" % (i, lineNumber)
    if entry.kind == EXTERNAL:
        return "%d: at line %d, %s:" % (i, lineNumber, entry.detail)
    return "%d: at line %d, in %s:" % (i, lineNumber, entry.detail)



def formatEntry(i, tokens, entry):
    """
    Render a single trace entry.

    @param i: The index of C{entry} in its trace.
    @param tokens: The full L{TokenSequence} that was parsed.
    @param entry: The L{TraceEntry} to render.
    @rtype: L{str}
    """
    last = tokens.last()
    if last is None:
        return _emptyInput(i, entry)

    remaining = entry.remaining
    if remaining is not None and len(remaining):
        token = remaining[0]
        lineNumber, column = token.line, token.column
        if token.kind == WORD:
            found = "'%s'" % (token.text,)
        else:
            found = "%s %r" % (token.kind, token.text)
    else:
        # Out of tokens: point just past the end of the input.
        token = last
        lineNumber = token.line
        column = token.column + len(token.text)
        found = None

    lines = [_header(i, lineNumber, entry),
             token.lineText,
             caret(token.lineText, column)]
    if entry.kind == EXPECTED:
        if found is None:
            lines.append("expected '%s', got end of input" % (entry.detail,))
        else:
            lines.append("expected '%s', found %s" % (entry.detail, found))
    elif found is None:
        lines.append("got end of input")
    return '\n'.join(lines) + '\n\n'



def formatTrace(tokens, trace):
    """
    Render a failure trace as line and column annotated text, one block per
    entry.

    @param tokens: The full L{TokenSequence} that was parsed.
    @param trace: A C{list} of L{TraceEntry}, innermost first.
    @rtype: L{str}
    """
    return ''.join(formatEntry(i, tokens, entry)
                   for i, entry in enumerate(trace))
