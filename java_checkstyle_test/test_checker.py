"""
检查器单元测试
"""

import os
import tempfile
import threading
import unittest
from typing import List

from java_checkstyle import ast
from java_checkstyle.api import Check, LocalizedMessage, SeverityLevel
from java_checkstyle.checker import Checker, CheckstyleConfigError, format_message
from java_checkstyle.checks import ModifierOrderCheck

SOURCE_CODE = """package demo;

import static java.util.Objects.requireNonNull;

/**
 * public static final
 */
public abstract class Demo {
    final static int COUNT = 1;
    private static final String NAME = "static public";

    static {
        requireNonNull(NAME);
    }

    abstract public void run();

    public synchronized static void sync() {
        synchronized (Demo.class) { }
    }

    @Override
    public final String toString() {
        return NAME;
    }

    protected static final native strictfp int hash();
}
"""


class RecordingCheck(Check):
    """记录遍历顺序的检查规则"""

    def __init__(self):
        super().__init__()
        self.events = []

    def default_tokens(self) -> List[ast.TreeKind]:
        return [ast.TreeKind.COMPILATION_UNIT, ast.TreeKind.MODIFIERS]

    def begin_tree(self, root: ast.CompilationUnitTree) -> None:
        self.events.append("begin")

    def visit_tree(self, tree: ast.Tree) -> None:
        self.events.append(f"visit {tree.kind.name}")

    def leave_tree(self, tree: ast.Tree) -> None:
        self.events.append(f"leave {tree.kind.name}")

    def finish_tree(self, root: ast.CompilationUnitTree) -> None:
        self.events.append("finish")


class BarrierCheck(ModifierOrderCheck):
    """所有线程都进入 visit_tree 之后才开始检查的修饰符顺序检查规则"""

    def __init__(self, parties: int):
        super().__init__()
        self.barrier = threading.Barrier(parties)

    def visit_tree(self, tree: ast.Tree) -> None:
        self.barrier.wait(timeout=10)
        super().visit_tree(tree)


class CheckerTest(unittest.TestCase):
    """测试用例"""

    @staticmethod
    def _summary(messages: List[LocalizedMessage]):
        return [(message.line, message.column, message.key, message.args) for message in messages]

    def test_process(self):
        checker = Checker([ModifierOrderCheck()])
        messages = checker.process(SOURCE_CODE, file_name="Demo.java")
        self.assertEqual([
            (9, 11, "mod.order", ("static",)),
            (16, 14, "mod.order", ("public",)),
            (18, 25, "mod.order", ("static",)),
        ], self._summary(messages))
        self.assertTrue(all(message.file_name == "Demo.java" for message in messages))
        self.assertEqual("Demo.java:9:11: 'static' modifier out of order with the JLS suggestions.",
                         format_message(messages[0]))

    def test_one_message_per_clause(self):
        messages = Checker([ModifierOrderCheck()]).process("class A { final static public int B = 1; }")
        self.assertEqual([(1, 17, "mod.order", ("static",))], self._summary(messages))

    def test_valid_source(self):
        code = ("public final class A {\n"
                "    @Deprecated public static final int B = 1;\n"
                "    private transient volatile int c;\n"
                "}\n")
        self.assertEqual([], Checker([ModifierOrderCheck()]).process(code))

    def test_annotation_is_ignored(self):
        code = "class A { @Override public @Nonnull final String f() { return null; } }"
        self.assertEqual([], Checker([ModifierOrderCheck()]).process(code))

    def test_unknown_modifier(self):
        code = ("interface A {\n"
                "    default void f() { }\n"
                "}\n")
        self.assertEqual([(2, 5, "mod.order", ("default",))],
                         self._summary(Checker([ModifierOrderCheck()]).process(code)))

    def test_dispatch(self):
        check = RecordingCheck()
        Checker([check]).process("public class A { static int b; }")
        self.assertEqual([
            "begin",
            "visit COMPILATION_UNIT",
            "visit MODIFIERS",
            "leave MODIFIERS",
            "visit MODIFIERS",
            "leave MODIFIERS",
            "leave COMPILATION_UNIT",
            "finish",
        ], check.events)

    def test_from_config(self):
        checker = Checker.from_config(["ModifierOrder"], severity=SeverityLevel.WARNING)
        self.assertEqual(1, len(checker.checks))
        self.assertIsInstance(checker.checks[0], ModifierOrderCheck)
        messages = checker.process("static public class A { }")
        self.assertEqual([SeverityLevel.WARNING], [message.severity for message in messages])

        with self.assertRaises(CheckstyleConfigError):
            Checker.from_config(["ModifierOrder", "UnknownCheck"])

    def test_concurrent_process(self):
        """多个线程同时使用同一个检查器时，消息写入各自的消息收集器"""
        checker = Checker([BarrierCheck(parties=2)])
        sources = {
            "A.java": "static public int a;",
            "B.java": "class B {\n    final private int b;\n}",
        }
        results = {}

        def run(file_name: str):
            results[file_name] = checker.process(sources[file_name], file_name=file_name)

        threads = [threading.Thread(target=run, args=(file_name,)) for file_name in sources]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)

        self.assertEqual([("A.java", 1, 8, ("public",))],
                         [(message.file_name, message.line, message.column, message.args)
                          for message in results["A.java"]])
        self.assertEqual([("B.java", 2, 11, ("private",))],
                         [(message.file_name, message.line, message.column, message.args)
                          for message in results["B.java"]])

    def test_process_directory(self):
        with tempfile.TemporaryDirectory() as dir_path:
            os.makedirs(os.path.join(dir_path, "pkg"))
            files = {
                "A.java": "public class A { final public int a = 1; }",
                os.path.join("pkg", "B.java"): "public class B { private static final int b = 1; }",
                os.path.join("pkg", "C.java"): "public class C {\n    String c = \"unclosed;\n}",
                "notes.txt": "static public",
            }
            for file_name, code in files.items():
                with open(os.path.join(dir_path, file_name), "w", encoding="UTF-8") as file:
                    file.write(code)

            checker = Checker([ModifierOrderCheck()])
            self.assertEqual([os.path.join(dir_path, "A.java"),
                              os.path.join(dir_path, "pkg", "B.java"),
                              os.path.join(dir_path, "pkg", "C.java")], checker.iter_files(dir_path))

            with self.assertLogs("java_checkstyle", level="ERROR"):
                messages = checker.process_directory(dir_path)

            self.assertEqual([
                (os.path.join(dir_path, "A.java"), 1, 24, "mod.order"),
                (os.path.join(dir_path, "pkg", "C.java"), 2, 16, "general.exception"),
            ], [(message.file_name, message.line, message.column, message.key) for message in messages])


if __name__ == "__main__":
    unittest.main()
