"""
词法解析器单元测试
"""

import unittest
from typing import List, Tuple

from java_checkstyle.lexical import AffiliationStyle
from java_checkstyle.lexical import JavaLexicalError
from java_checkstyle.lexical import LexicalFSM
from java_checkstyle.lexical import TokenKind


class LexicalTest(unittest.TestCase):
    """测试用例"""

    @staticmethod
    def _lexical_parse(script: str) -> List[Tuple[TokenKind, str]]:
        lexical_fsm = LexicalFSM(script)
        token_list = []
        while token := lexical_fsm.lex():
            if token.kind == TokenKind.EOF:
                break
            token_list.append((token.kind, token.source))
        return token_list

    def _assert_equal(self, script: str, answer: List[Tuple[TokenKind, str]]):
        tokens = self._lexical_parse(script)
        self.assertEqual(answer, tokens)

    def _assert_raise(self, script: str):
        with self.assertRaises(JavaLexicalError):
            self._lexical_parse(script)

    def testcase_basic_mark(self):
        """测试基础元素终结符的解析场景"""
        self._assert_equal("abc", [
            (TokenKind.IDENTIFIER, "abc"),
        ])
        self._assert_equal("{abc}", [
            (TokenKind.LBRACE, "{"),
            (TokenKind.IDENTIFIER, "abc"),
            (TokenKind.RBRACE, "}"),
        ])
        self._assert_equal("(abc)", [
            (TokenKind.LPAREN, "("),
            (TokenKind.IDENTIFIER, "abc"),
            (TokenKind.RPAREN, ")"),
        ])
        self._assert_equal("<abc>", [
            (TokenKind.LT, "<"),
            (TokenKind.IDENTIFIER, "abc"),
            (TokenKind.GT, ">"),
        ])
        self._assert_equal("abc.def", [
            (TokenKind.IDENTIFIER, "abc"),
            (TokenKind.DOT, "."),
            (TokenKind.IDENTIFIER, "def"),
        ])
        self._assert_equal("abc,def;", [
            (TokenKind.IDENTIFIER, "abc"),
            (TokenKind.COMMA, ","),
            (TokenKind.IDENTIFIER, "def"),
            (TokenKind.SEMI, ";"),
        ])
        self._assert_equal("@(abc)", [
            (TokenKind.MONKEYS_AT, "@"),
            (TokenKind.LPAREN, "("),
            (TokenKind.IDENTIFIER, "abc"),
            (TokenKind.RPAREN, ")"),
        ])

    def test_operator(self):
        """测试多字符运算符"""
        self._assert_equal("a -> b", [
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.ARROW, "->"),
            (TokenKind.IDENTIFIER, "b"),
        ])
        self._assert_equal("String::valueOf", [
            (TokenKind.IDENTIFIER, "String"),
            (TokenKind.COLCOL, "::"),
            (TokenKind.IDENTIFIER, "valueOf"),
        ])
        self._assert_equal("String... args", [
            (TokenKind.IDENTIFIER, "String"),
            (TokenKind.ELLIPSIS, "..."),
            (TokenKind.IDENTIFIER, "args"),
        ])
        self._assert_equal("a >>>= 1", [
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.GT_GT_GT_EQ, ">>>="),
            (TokenKind.INT_LITERAL, "1"),
        ])
        self._assert_equal("a<<=b", [
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.LT_LT_EQ, "<<="),
            (TokenKind.IDENTIFIER, "b"),
        ])
        self._assert_equal("non-sealed", [
            (TokenKind.IDENTIFIER, "non"),
            (TokenKind.SUB, "-"),
            (TokenKind.IDENTIFIER, "sealed"),
        ])

    def test_literal(self):
        """测试字面值的解析场景"""
        self._assert_equal("10", [(TokenKind.INT_LITERAL, "10")])
        self._assert_equal("10L", [(TokenKind.LONG_LITERAL, "10L")])
        self._assert_equal("012", [(TokenKind.INT_LITERAL, "012")])
        self._assert_equal("0x0AL", [(TokenKind.LONG_LITERAL, "0x0AL")])
        self._assert_equal("1_000_000", [(TokenKind.INT_LITERAL, "1_000_000")])
        self._assert_equal("3.14f", [(TokenKind.FLOAT_LITERAL, "3.14f")])
        self._assert_equal(".14f", [(TokenKind.FLOAT_LITERAL, ".14f")])
        self._assert_equal("3.", [(TokenKind.DOUBLE_LITERAL, "3.")])
        self._assert_equal("3.14e-1", [(TokenKind.DOUBLE_LITERAL, "3.14e-1")])
        self._assert_equal("'A'", [(TokenKind.CHAR_LITERAL, "'A'")])
        self._assert_equal(r"'\''", [(TokenKind.CHAR_LITERAL, r"'\''")])
        self._assert_equal("\"Hello, World!\"", [(TokenKind.STRING_LITERAL, "\"Hello, World!\"")])
        self._assert_equal("\"Hello, \\\"World\\\"!\"", [(TokenKind.STRING_LITERAL, "\"Hello, \\\"World\\\"!\"")])
        self._assert_equal("\"\"", [(TokenKind.STRING_LITERAL, "\"\"")])
        self._assert_equal("true", [(TokenKind.TRUE, "true")])
        self._assert_equal("null", [(TokenKind.NULL, "null")])

    def test_text_block(self):
        """测试文本块"""
        script = "String s = \"\"\"\n    public static\n    \"\"\";"
        self._assert_equal(script, [
            (TokenKind.IDENTIFIER, "String"),
            (TokenKind.IDENTIFIER, "s"),
            (TokenKind.EQ, "="),
            (TokenKind.STRING_LITERAL, "\"\"\"\n    public static\n    \"\"\""),
            (TokenKind.SEMI, ";"),
        ])

    def test_keyword(self):
        """测试关键字"""
        self._assert_equal("public protected private abstract static final", [
            (TokenKind.PUBLIC, "public"),
            (TokenKind.PROTECTED, "protected"),
            (TokenKind.PRIVATE, "private"),
            (TokenKind.ABSTRACT, "abstract"),
            (TokenKind.STATIC, "static"),
            (TokenKind.FINAL, "final"),
        ])
        self._assert_equal("transient volatile synchronized native strictfp default", [
            (TokenKind.TRANSIENT, "transient"),
            (TokenKind.VOLATILE, "volatile"),
            (TokenKind.SYNCHRONIZED, "synchronized"),
            (TokenKind.NATIVE, "native"),
            (TokenKind.STRICTFP, "strictfp"),
            (TokenKind.DEFAULT, "default"),
        ])
        self._assert_equal("sealed", [(TokenKind.IDENTIFIER, "sealed")])

    def test_comment(self):
        """测试注释：注释不生成终结符，而是作为附属元素挂载到之后的终结符上"""
        self._assert_equal("public /* static */ final // native\nint", [
            (TokenKind.PUBLIC, "public"),
            (TokenKind.FINAL, "final"),
            (TokenKind.INT, "int"),
        ])

        lexical_fsm = LexicalFSM("/** doc */\npublic")
        token = lexical_fsm.lex()
        self.assertEqual(TokenKind.PUBLIC, token.kind)
        self.assertEqual([AffiliationStyle.JAVADOC_BLOCK, AffiliationStyle.LINEBREAK],
                         [affiliation.style for affiliation in token.affiliations])
        self.assertEqual("/** doc */", token.affiliations[0].text)

    def test_position(self):
        """测试终结符的位置、行号和列号"""
        lexical_fsm = LexicalFSM("class A {\n\tpublic  static int b;\r\n}")
        tokens = []
        while not (token := lexical_fsm.lex()).is_end:
            tokens.append(token)
        self.assertEqual((TokenKind.CLASS, 0, 5, 1, 1), (tokens[0].kind, tokens[0].pos, tokens[0].end_pos,
                                                         tokens[0].line, tokens[0].column))
        self.assertEqual((TokenKind.PUBLIC, 2, 2), (tokens[3].kind, tokens[3].line, tokens[3].column))
        self.assertEqual((TokenKind.STATIC, 2, 10), (tokens[4].kind, tokens[4].line, tokens[4].column))
        self.assertEqual((TokenKind.RBRACE, 3, 1), (tokens[-1].kind, tokens[-1].line, tokens[-1].column))

    def test_lookahead(self):
        """测试预读终结符"""
        lexical_fsm = LexicalFSM("public static final")
        self.assertEqual(TokenKind.FINAL, lexical_fsm.token(2).kind)
        self.assertEqual(TokenKind.PUBLIC, lexical_fsm.lex().kind)
        self.assertEqual(TokenKind.STATIC, lexical_fsm.lex().kind)
        self.assertEqual(TokenKind.EOF, lexical_fsm.token(2).kind)
        self.assertEqual(TokenKind.FINAL, lexical_fsm.lex().kind)
        self.assertEqual(TokenKind.EOF, lexical_fsm.lex().kind)
        self.assertEqual(TokenKind.EOF, lexical_fsm.lex().kind)

    def test_error(self):
        """测试词法错误"""
        self._assert_raise("\"abc")
        self._assert_raise("'a")
        self._assert_raise("/* abc")
        self._assert_raise("\"\"\"\nabc")
        self._assert_raise("a .. b")

        with self.assertRaises(JavaLexicalError) as context:
            self._lexical_parse("int a;\nString b = \"abc")
        self.assertEqual((2, 12), (context.exception.line, context.exception.column))


if __name__ == "__main__":
    unittest.main()
