# -*- test-case-name: parsezone.test.test_protocol -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Exceptions raised while parsing a zone file line.
"""


class ZoneParseError(Exception):
    """
    Base class for every failure to turn a zone file line into a row.
    """



class TokenizeError(ZoneParseError):
    """
    The input could not be split into tokens.

    @ivar line: 1-based line number of the offending character, or L{None}
        if the input could not even be decoded.
    @ivar column: 1-based column of the offending character, or L{None}.
    @ivar lineText: The text of the line holding the offending character.
    """

    def __init__(self, message, line=None, column=None, lineText=''):
        ZoneParseError.__init__(self, message)
        self.message = message
        self.line = line
        self.column = column
        self.lineText = lineText


    def __str__(self):
        if self.line is None:
            return self.message
        return "at line %d, column %d: %s\n%s" % (
            self.line, self.column, self.message, self.lineText)



class GrammarError(ZoneParseError):
    """
    No row shape matched the tokens of the line.

    @ivar tokens: The L{TokenSequence} that was parsed.
    @ivar trace: The failure trace of the alternative that got furthest, a
        C{list} of L{parsezone.zone.diagnostics.TraceEntry}, innermost first.
    @ivar diagnostic: The rendered, human readable form of C{trace}.
    """

    def __init__(self, tokens, trace, diagnostic):
        ZoneParseError.__init__(self, diagnostic)
        self.tokens = tokens
        self.trace = trace
        self.diagnostic = diagnostic


    def __str__(self):
        return self.diagnostic



class IncompleteInputError(GrammarError):
    """
    The line ended while a field was still expected.
    """



class ResidualInputError(GrammarError):
    """
    A row was recognised but tokens were left over after it.
    """
