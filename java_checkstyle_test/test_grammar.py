"""
语法解析器单元测试：修饰符子句的提取
"""

import unittest
from typing import List

from java_checkstyle import ast
from java_checkstyle.ast import TreeKind
from java_checkstyle.grammar import JavaParser, JavaSyntaxError
from java_checkstyle.lexical import LexicalFSM


class GrammarTest(unittest.TestCase):
    """测试用例"""

    @staticmethod
    def _parse(script: str) -> ast.CompilationUnitTree:
        return JavaParser(LexicalFSM(script)).parse_compilation_unit()

    @classmethod
    def _modifier_texts(cls, script: str) -> List[List[str]]:
        """返回每个修饰符子句中的修饰符文本"""
        return [[flag.text for flag in modifiers.flags] for modifiers in cls._parse(script).modifiers]

    def test_class_declaration(self):
        script = ("public final class A {\n"
                  "    private static final long serialVersionUID = 1L;\n"
                  "    protected abstract void run();\n"
                  "    public static synchronized native int hash(Object o);\n"
                  "}\n")
        self.assertEqual([
            ["public", "final"],
            ["private", "static", "final"],
            ["protected", "abstract"],
            ["public", "static", "synchronized", "native"],
        ], self._modifier_texts(script))

    def test_modifier_position(self):
        tree = self._parse("class A {\n    static public int b;\n}")
        self.assertEqual(1, len(tree.modifiers))
        modifiers = tree.modifiers[0]
        self.assertEqual(TreeKind.MODIFIERS, modifiers.kind)
        self.assertEqual("static public", modifiers.source)
        self.assertEqual([(TreeKind.MODIFIER, "static", 2, 5), (TreeKind.MODIFIER, "public", 2, 12)],
                         [(flag.kind, flag.text, flag.line, flag.column) for flag in modifiers.children()])

    def test_annotation(self):
        script = ("@Deprecated\n"
                  "public class A {\n"
                  "    @SuppressWarnings({\"unchecked\", \"rawtypes\"}) private @javax.annotation.Nullable static "
                  "Object b;\n"
                  "}\n")
        tree = self._parse(script)
        self.assertEqual([["public"], ["private", "static"]], self._modifier_texts(script))

        first = tree.modifiers[0]
        self.assertEqual(["Deprecated"], [annotation.name for annotation in first.annotations])
        self.assertEqual([TreeKind.ANNOTATION, TreeKind.MODIFIER], [child.kind for child in first.children()])

        second = tree.modifiers[1]
        self.assertEqual(["SuppressWarnings", "javax.annotation.Nullable"],
                         [annotation.name for annotation in second.annotations])
        self.assertEqual([TreeKind.ANNOTATION, TreeKind.MODIFIER, TreeKind.ANNOTATION, TreeKind.MODIFIER],
                         [child.kind for child in second.children()])

    def test_annotation_only(self):
        tree = self._parse("class A { void f(@Nonnull String s) {} }")
        self.assertEqual(1, len(tree.modifiers))
        self.assertEqual([], tree.modifiers[0].flags)
        self.assertEqual("@Nonnull", tree.modifiers[0].generate())

    def test_annotation_type_declaration(self):
        script = ("public @interface Marker {\n"
                  "    String value() default \"\";\n"
                  "    int[] codes() default {};\n"
                  "}\n")
        self.assertEqual([["public"]], self._modifier_texts(script))

    def test_synchronized_block(self):
        script = "class A { void f() { synchronized (this) { } } synchronized void g() { } }"
        self.assertEqual([["synchronized"]], self._modifier_texts(script))

    def test_static_initializer_and_import(self):
        script = ("import static java.lang.Math.max;\n"
                  "class A {\n"
                  "    static { }\n"
                  "    static final int B = 1;\n"
                  "}\n")
        self.assertEqual([["static", "final"]], self._modifier_texts(script))

    def test_default(self):
        script = ("interface A {\n"
                  "    default void f(int x) {\n"
                  "        switch (x) {\n"
                  "            case 1: break;\n"
                  "            default: break;\n"
                  "        }\n"
                  "        int y = switch (x) { default -> 0; };\n"
                  "    }\n"
                  "    public default void g() { }\n"
                  "}\n")
        self.assertEqual([["default"], ["public", "default"]], self._modifier_texts(script))

    def test_sealed(self):
        script = ("public sealed interface Shape permits Circle, Square { }\n"
                  "public non-sealed class Circle implements Shape { }\n"
                  "final class Square implements Shape { int sealed = 1; }\n")
        self.assertEqual([["public", "sealed"], ["public", "non-sealed"], ["final"]], self._modifier_texts(script))

        non_sealed = self._parse(script).modifiers[1].flags[1]
        self.assertEqual(("non-sealed", 2, 8), (non_sealed.text, non_sealed.line, non_sealed.column))

    def test_sealed_lookahead(self):
        """sealed 和 non-sealed 之后的终结符决定它们是否作为修饰符"""
        script = ("class A {\n"
                  "    void f() {\n"
                  "        sealed class B permits C { }\n"
                  "        non-sealed class C extends B { }\n"
                  "        int sealed = non - sealed;\n"
                  "    }\n"
                  "    sealed @Deprecated static non-sealed abstract class D { }\n"
                  "}\n")
        self.assertEqual([["sealed"], ["non-sealed"], ["sealed", "static", "non-sealed", "abstract"]],
                         self._modifier_texts(script))

    def test_modifier_keyword(self):
        """只有修饰符关键字会构成修饰符子句"""
        self.assertEqual([["public", "protected", "private", "abstract", "default", "static", "final", "transient",
                           "volatile", "synchronized", "native", "strictfp"]],
                         self._modifier_texts("public protected private abstract default static final transient "
                                              "volatile synchronized native strictfp int a;"))
        self.assertEqual([], self._modifier_texts("int class interface enum void;"))

    def test_local_and_parameter(self):
        script = ("class A {\n"
                  "    void f(final int a) {\n"
                  "        for (final String s : list) { }\n"
                  "        Runnable r = (final var x) -> { };\n"
                  "        try { } catch (final Exception e) { }\n"
                  "    }\n"
                  "}\n")
        self.assertEqual([["final"], ["final"], ["final"], ["final"]], self._modifier_texts(script))

    def test_modifiers_in_comment_and_string(self):
        script = ("class A {\n"
                  "    // static public\n"
                  "    /* final private */\n"
                  "    String s = \"static public\";\n"
                  "}\n")
        self.assertEqual([], self._modifier_texts(script))

    def test_repeated_modifier(self):
        self.assertEqual([["public", "public"]], self._modifier_texts("public public class A { }"))

    def test_syntax_error(self):
        with self.assertRaises(JavaSyntaxError):
            self._parse("@ class A { }")
        with self.assertRaises(JavaSyntaxError):
            self._parse("@A(1 class B { }")

    def test_generate(self):
        tree = self._parse("@A public static class B { private final int c; }")
        self.assertEqual("@A public static\nprivate final", tree.generate())


if __name__ == "__main__":
    unittest.main()
