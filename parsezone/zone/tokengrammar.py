# -*- test-case-name: parsezone.test.test_grammar -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Parsley grammars over a L{TokenSequence}.

Parsley only remembers how far a failed parse got.  L{TokenGrammar} also
keeps, for every token level failure, a trace naming what was expected and
the grammar contexts it happened in, so a rejected line can be explained.
"""

from ometa.runtime import OMetaBase, ParseError

from parsezone.zone import diagnostics



class Mismatch(Exception):
    """
    A rule did not match the tokens.

    @ivar trace: C{list} of L{diagnostics.TraceEntry}, innermost first.
    """

    def __init__(self, trace):
        Exception.__init__(self, trace)
        self.trace = trace


    @property
    def position(self):
        """
        The furthest token position reached before failing.
        """
        return _position(self.trace)



class CommittedMismatch(Mismatch):
    """
    A rule failed past a commit point; no alternative may be tried.

    This is not a L{ParseError}, so Parsley's ordered choice lets it through
    instead of moving on to the next alternative.
    """



def _position(trace):
    return max(entry.position for entry in trace)



class TokenGrammar(OMetaBase):
    """
    Base class for Parsley grammars whose input items are L{Token}s.

    Rules match whole tokens, so literals in the grammar compare against
    single input items, as they do for tree input.

    @cvar contexts: Mapping of rule names to the context name recorded in
        the trace when a failure happens inside that rule.

    @ivar tokens: The L{TokenSequence} being parsed.
    @ivar failures: Every trace recorded so far, oldest first.
    """
    tree = True
    contexts = {}

    def __init__(self, tokens):
        OMetaBase.__init__(self, tokens)
        self.tokens = tokens
        self.failures = []
        self._active = []


    def _apply(self, rule, ruleName, args):
        start = self.input
        name = self.contexts.get(ruleName)
        if name is not None:
            self._active.append((name, start.position))
        try:
            return OMetaBase._apply(self, rule, ruleName, args)
        except ParseError:
            # Forget the failure so that applying the rule at this token
            # again records its trace again.
            start.setMemo(ruleName, None)
            raise
        finally:
            if name is not None:
                self._active.pop()


    def fail(self, position, entry, detail):
        """
        Record a failure at the token at C{position}.

        @param entry: L{diagnostics.expected} or L{diagnostics.external}.
        @param detail: What was expected, or the conversion error message.

        @return: The L{ParseError} to raise.
        """
        trace = [entry(self.tokens[position:], detail)]
        for name, start in reversed(self._active):
            trace.append(diagnostics.context(self.tokens[start:], name))
        self.failures.append(trace)
        if entry is diagnostics.expected:
            error = [('expected', None, detail)]
        else:
            error = [('message', detail)]
        return ParseError(self.input.data, position, error)


    @property
    def failure(self):
        """
        The trace of the failure that got furthest; the later one wins a tie.
        """
        best = None
        for trace in self.failures:
            if best is None or _position(trace) >= _position(best):
                best = trace
        return best


    def convert(self, position, parse, *args):
        """
        Call C{parse} with C{args}, recording a C{ValueError} it raises as
        a failure at the token at C{position}.
        """
        try:
            return parse(*args)
        except ValueError as e:
            raise self.fail(position, diagnostics.external, str(e))


    def commit(self):
        """
        Make the latest failure final.

        @raise CommittedMismatch: always.
        """
        raise CommittedMismatch(self.failures[-1])


    def rule_position(self):
        """
        Match nothing and return the index of the current token.
        """
        return self.input.position, self.input.nullError()


    def rule_expected(self, what):
        """
        Fail at the current token, expecting C{what}.
        """
        raise self.fail(self.input.position, diagnostics.expected, what)


    def _traceFromError(self, error):
        """
        Build a trace from a Parsley error for failures no rule recorded.
        """
        position = min(error.position, len(self.tokens))
        remaining = self.tokens[position:]
        trace = []
        for item in error.error:
            if item[0] == 'expected':
                trace.append(diagnostics.expected(remaining, item[2]))
            else:
                trace.append(diagnostics.external(remaining, item[1]))
        if not trace:
            trace.append(diagnostics.external(remaining,
                                              error.formatReason()))
        return trace


    def parse(self, ruleName, *args):
        """
        Apply a rule to the start of the tokens.

        @raise Mismatch: if the rule did not match; it carries the trace of
            the failure that got furthest.
        @raise CommittedMismatch: if the rule failed past a commit point.
        @return: C{(rest, value)}, where C{rest} is the L{TokenSequence} the
            rule did not consume.
        """
        try:
            value, _ = self.apply(ruleName, *args)
        except ParseError as e:
            trace = self.failure
            if trace is None:
                trace = self._traceFromError(e)
            raise Mismatch(trace)
        return self.tokens[self.input.position:], value
