# -*- test-case-name: parsezone.test.test_tokens -*-
# Copyright (c) Twisted Matrix Laboratories.
# See LICENSE for details.

"""
Tests for parsezone.zone.tokens.
"""

from twisted.trial import unittest

from parsezone.zone import tokens
from parsezone.zone.errors import TokenizeError
from parsezone.zone.tokens import (
    COMMENT, NEWLINE, PAREN, WHITESPACE, WORD, Token, TokenSequence, tokenize)


class TokenizeTests(unittest.TestCase):
    """
    Tests for L{tokens.tokenize}.
    """

    lines = [
        "A       A       26.3.0.103",
        "        MX      20      VAXA",
        "foo\tIN\tAAAA\t2001:db8:10::1",
        "example.com.  IN  NS    ns   ; ns.example.com is a nameserver\n",
        "@   IN  SOA     VENERA      Action\\.domains (\r\n    20 )",
        "   ",
        "",
    ]

    def test_kinds(self):
        """
        Runs of spaces and tabs become whitespace tokens, and runs of other
        characters become words.
        """
        seq = tokenize("        NS\tVAXA")
        self.assertEqual(
            [(t.kind, t.text) for t in seq],
            [(WHITESPACE, "        "), (WORD, "NS"), (WHITESPACE, "\t"),
             (WORD, "VAXA")])


    def test_delimiters(self):
        """
        Comments, parentheses and line terminators get tokens of their own.
        """
        seq = tokenize("a (b) ; note\r\nc")
        self.assertEqual(
            [(t.kind, t.text) for t in seq],
            [(WORD, "a"), (WHITESPACE, " "), (PAREN, "("), (WORD, "b"),
             (PAREN, ")"), (WHITESPACE, " "), (COMMENT, "; note"),
             (NEWLINE, "\r\n"), (WORD, "c")])


    def test_lossless(self):
        """
        Joining the text of all tokens gives back the input.
        """
        for line in self.lines:
            seq = tokenize(line)
            self.assertEqual(''.join(t.text for t in seq), line)
            self.assertEqual(str(seq), line)


    def test_empty(self):
        """
        Empty input gives an empty sequence.
        """
        seq = tokenize("")
        self.assertEqual(len(seq), 0)
        self.assertIdentical(seq.last(), None)


    def test_positions(self):
        """
        Each token knows its line, its 1-based column and the text of its
        line.
        """
        seq = tokenize("a b\n  cd")
        self.assertEqual(
            [(t.text, t.line, t.column, t.offset, t.lineText) for t in seq],
            [("a", 1, 1, 0, "a b"),
             (" ", 1, 2, 1, "a b"),
             ("b", 1, 3, 2, "a b"),
             ("\n", 1, 4, 3, "a b"),
             ("  ", 2, 1, 4, "  cd"),
             ("cd", 2, 3, 6, "  cd")])


    def test_tabColumns(self):
        """
        Tabs count as a single column; they are not expanded.
        """
        seq = tokenize("foo\tA\t1.2.3.4")
        self.assertEqual([t.column for t in seq], [1, 4, 5, 6, 7])
        self.assertEqual(seq[2].lineText, "foo\tA\t1.2.3.4")


    def test_lineTextWithoutTerminator(self):
        """
        The line text of a token does not include C{\\r\\n}.
        """
        seq = tokenize("a\r\nb")
        self.assertEqual(seq[0].lineText, "a")
        self.assertEqual(seq[2].lineText, "b")


    def test_nonASCIIWord(self):
        """
        Words may hold any non-whitespace character; judging them is up to
        the grammar.
        """
        seq = tokenize("été A")
        self.assertEqual(seq[0], Token(WORD, "été", 0, 1, 1, ""))


    def test_bytes(self):
        """
        UTF-8 encoded bytes are decoded before tokenizing.
        """
        seq = tokenize("café A 1.2.3.4".encode('utf-8'))
        self.assertEqual(seq[0].text, "café")
        self.assertEqual(seq[2].column, 6)


    def test_invalidEncoding(self):
        """
        Bytes that are not UTF-8 raise L{TokenizeError}.
        """
        e = self.assertRaises(TokenizeError, tokenize, b"\xff A 1.2.3.4")
        self.assertIdentical(e.line, None)
        self.assertIn("UTF-8", str(e))


    def test_unclassifiable(self):
        """
        A character that belongs to no token class raises L{TokenizeError}
        pointing at it.
        """
        for line, column in [("a\x0cb", 2), ("foo\u00a0A", 4),
                             ("ab\rcd", 3)]:
            e = self.assertRaises(TokenizeError, tokenize, line)
            self.assertEqual((e.line, e.column), (1, column))


    def test_unclassifiableOnLaterLine(self):
        """
        L{TokenizeError} carries the line number and text of the offending
        line.
        """
        e = self.assertRaises(TokenizeError, tokenize, "ok\nbad\x0bline")
        self.assertEqual((e.line, e.column), (2, 4))
        self.assertEqual(e.lineText, "bad\x0bline")
        self.assertIn("at line 2, column 4", str(e))



class TokenSequenceTests(unittest.TestCase):
    """
    Tests for L{tokens.TokenSequence}.
    """

    def setUp(self):
        self.seq = tokenize("foo IN A 1.2.3.4")


    def test_slice(self):
        """
        Slicing gives a L{TokenSequence} over the same tokens, whose
        C{offset} is its position in the full sequence.
        """
        rest = self.seq[2:]
        self.assertIsInstance(rest, TokenSequence)
        self.assertEqual(rest.offset, 2)
        self.assertEqual(len(rest), 5)
        self.assertIdentical(rest[0], self.seq[2])
        self.assertEqual(str(rest), "IN A 1.2.3.4")


    def test_nestedSlice(self):
        """
        Slicing a slice keeps offsets relative to the full sequence.
        """
        rest = self.seq[2:][2:4]
        self.assertEqual(rest.offset, 4)
        self.assertEqual([t.text for t in rest], ["A", " "])


    def test_sliceDoesNotReorder(self):
        """
        Slices keep tokens in order and never drop any inside their range.
        """
        self.assertEqual(list(self.seq[1:5]), list(self.seq)[1:5])


    def test_emptySlice(self):
        """
        Slicing past the end gives an empty sequence positioned at the end.
        """
        rest = self.seq[7:]
        self.assertEqual(len(rest), 0)
        self.assertFalse(rest)
        self.assertEqual(rest.offset, 7)
        self.assertEqual(rest.last().text, "1.2.3.4")


    def test_negativeIndex(self):
        self.assertEqual(self.seq[-1].text, "1.2.3.4")


    def test_indexError(self):
        self.assertRaises(IndexError, lambda: self.seq[7])
        self.assertRaises(IndexError, lambda: self.seq[3:4][1])


    def test_stepRejected(self):
        """
        Slices with a step would reorder or drop tokens, so they are
        refused.
        """
        self.assertRaises(ValueError, lambda: self.seq[::2])


    def test_equality(self):
        """
        Two sequences are equal when they hold equal tokens.
        """
        self.assertEqual(tokenize("foo IN A 1.2.3.4"), self.seq)
        self.assertNotEqual(self.seq[1:], self.seq)


    def test_dump(self):
        """
        L{TokenSequence.dump} lists one token per line with its position.
        """
        self.assertEqual(
            tokenize("a  b").dump(),
            "1:1\tword\t'a'\n1:2\twhitespace\t'  '\n1:4\tword\t'b'")


    def test_moduleConstants(self):
        """
        The token kinds are plain strings.
        """
        self.assertEqual(
            (tokens.WORD, tokens.WHITESPACE, tokens.NEWLINE, tokens.COMMENT,
             tokens.PAREN),
            ("word", "whitespace", "newline", "comment", "paren"))
