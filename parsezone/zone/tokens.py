# -*- test-case-name: parsezone.test.test_tokens -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Tokenizer for zone file text.

The tokenizer only segments text; it never decides what a word means.
Every character of the input ends up in exactly one token, so joining the
token texts gives back the input.
"""

import pyparsing as pp

from twisted.python import util as tputil

from parsezone.zone.errors import TokenizeError


WORD = 'word'
WHITESPACE = 'whitespace'
NEWLINE = 'newline'
COMMENT = 'comment'
PAREN = 'paren'



class Token(tputil.FancyEqMixin, tputil.FancyStrMixin):
    """
    A classified slice of the source text.

    @ivar kind: One of L{WORD}, L{WHITESPACE}, L{NEWLINE}, L{COMMENT} or
        L{PAREN}.
    @ivar text: The raw text of the token.
    @ivar offset: Index of the first character of the token in the input.
    @ivar line: 1-based line number.
    @ivar column: 1-based column, counted in characters.
    @ivar lineText: The whole line holding the token, without its line
        terminator.
    """
    compareAttributes = ('kind', 'text', 'offset', 'line', 'column')
    showAttributes = ('kind', 'text', 'line', 'column')

    def __init__(self, kind, text, offset, line, column, lineText):
        self.kind = kind
        self.text = text
        self.offset = offset
        self.line = line
        self.column = column
        self.lineText = lineText


    def __hash__(self):
        return hash((self.kind, self.text, self.offset))



class TokenSequence(object):
    """
    An immutable view over a run of L{Token}s.

    Slicing returns another L{TokenSequence} sharing the same storage, so
    the grammar can hand out sub-sequences without copying.

    @ivar offset: Index of the first token of this view in the full
        sequence produced by L{tokenize}.
    """

    def __init__(self, tokens, start=0, end=None):
        self._tokens = tuple(tokens)
        if end is None:
            end = len(self._tokens)
        self._start = start
        self._end = end


    @property
    def offset(self):
        return self._start


    def __len__(self):
        return self._end - self._start


    def __iter__(self):
        for i in range(self._start, self._end):
            yield self._tokens[i]


    def __getitem__(self, item):
        if isinstance(item, slice):
            start, stop, step = item.indices(len(self))
            if step != 1:
                raise ValueError("TokenSequence slices must be contiguous")
            stop = max(start, stop)
            return self.__class__(self._tokens, self._start + start,
                                  self._start + stop)
        if item < 0:
            item += len(self)
        if not 0 <= item < len(self):
            raise IndexError("token index out of range")
        return self._tokens[self._start + item]


    def __eq__(self, other):
        if isinstance(other, TokenSequence):
            return list(self) == list(other)
        return NotImplemented


    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result


    def __hash__(self):
        return hash(tuple(self))


    def __str__(self):
        return ''.join(t.text for t in self)


    def __repr__(self):
        return '<TokenSequence %s>' % (' '.join(
            '%s:%r' % (t.kind, t.text) for t in self),)


    def last(self):
        """
        Return the final token of the full sequence this view was cut from,
        or L{None} if that sequence is empty.
        """
        if not self._tokens:
            return None
        return self._tokens[-1]


    def dump(self):
        """
        Render one token per line, for debug logging.
        """
        return '\n'.join('%d:%d\t%s\t%r' % (t.line, t.column, t.kind, t.text)
                         for t in self)



def _tokenAction(kind):
    def action(s, loc, toks):
        return Token(kind, toks[0], loc, pp.lineno(loc, s), pp.col(loc, s),
                     pp.line(loc, s).rstrip('\r'))
    return action


def _tokenExpression(kind, pattern):
    return pp.Regex(pattern).set_name(kind).set_parse_action(_tokenAction(kind))


_token = (_tokenExpression(WHITESPACE, r"[ \t]+")
          | _tokenExpression(NEWLINE, r"\r?\n")
          | _tokenExpression(COMMENT, r";[^\r\n]*")
          | _tokenExpression(PAREN, r"[()]")
          | _tokenExpression(WORD, r"[^\s;()]+"))

# Tabs are kept so columns and the lossless round trip refer to the
# original text.
_lexer = (pp.ZeroOrMore(_token) + pp.StringEnd()).leave_whitespace()
_lexer.parse_with_tabs()



def tokenize(data):
    """
    Split zone file text into tokens.

    @param data: The text to split.
    @type data: L{str}, or L{bytes} holding UTF-8

    @raise TokenizeError: if C{data} is not valid UTF-8, or holds a
        character that belongs to no token class.

    @rtype: L{TokenSequence}
    """
    if isinstance(data, bytes):
        try:
            data = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise TokenizeError("input is not valid UTF-8: %s" % (e,))
    try:
        tokens = _lexer.parse_string(data)
    except pp.ParseBaseException as e:
        raise TokenizeError("unexpected character %r" % (data[e.loc],),
                            e.lineno, e.column, e.line.rstrip('\r'))
    return TokenSequence(tokens)
