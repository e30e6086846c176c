# -*- test-case-name: parsezone.test.test_protocol -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Zone file line parsing.

L{ZoneLineParser} turns one resource record line into a
L{parsezone.zone.records.Row}.  It does not know about C{$ORIGIN}, C{$TTL}
or records spanning several lines; a zone file reader built on top of it
splits the file and fills in inherited names, TTLs and classes.
"""

# Twisted imports
from twisted.logger import Logger

# Parsezone
from parsezone.zone import grammar, records, tokens
from parsezone.zone.errors import GrammarError, TokenizeError



class ZoneLineParser(object):
    """
    Parse single zone file lines.

    Diagnostics go to a L{twisted.logger} observer: the token dump and the
    parsed row at debug level, and the rendered failure at warn level.
    Nothing is ever printed.

    @cvar recordTypes: The supported record type keywords, a subset of
        L{records.RECORD_TYPES}.
    @cvar classes: Mapping of class keywords to L{twisted.names.dns} class
        constants.
    """
    log = Logger()
    recordTypes = records.RECORD_TYPES
    classes = records.CLASSES

    def __init__(self, observer=None):
        """
        @param observer: An L{twisted.logger.ILogObserver} receiving this
            parser's events.  If L{None}, events go to the global log
            publisher.
        """
        if observer is not None:
            self.log = Logger(
                namespace='%s.%s' % (self.__class__.__module__,
                                     self.__class__.__name__),
                source=self, observer=observer)


    def tokenize(self, line):
        """
        @type line: L{str} or UTF-8 L{bytes}
        @rtype: L{tokens.TokenSequence}
        """
        return tokens.tokenize(line)


    def parse(self, line):
        """
        Parse one resource record line.

        @type line: L{str} or UTF-8 L{bytes}

        @raise TokenizeError: if the line cannot be split into tokens.
        @raise GrammarError: if the tokens do not form a record; see its
            subclasses for truncated lines and trailing garbage.
        @rtype: L{records.Row}
        """
        try:
            seq = self.tokenize(line)
        except TokenizeError as e:
            self.log.warn("Could not tokenize zone line: {error}", error=e)
            raise
        self.log.debug("Tokens:\n{tokens}", tokens=seq.dump())

        try:
            row = grammar.parseRow(seq, self.recordTypes, self.classes)
        except GrammarError as e:
            self.log.warn("Rejected zone line {line!r}:\n{diagnostic}",
                          line=str(seq), diagnostic=e.diagnostic,
                          error=e)
            raise
        self.log.debug("Parsed {row}", row=row)
        return row



_parser = ZoneLineParser()


def parse(line):
    """
    Parse one resource record line with a default L{ZoneLineParser}.
    """
    return _parser.parse(line)
