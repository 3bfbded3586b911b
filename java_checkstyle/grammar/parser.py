"""
语法解析器

只解析检查规则所需要的语法结构：在终结符流中找出每一个声明语句的修饰符子句，构造为 MODIFIERS 节点；其他终结符被跳过。
"""

from typing import Any, Dict, List, Optional

from java_checkstyle import ast
from java_checkstyle.grammar.token_set import ALLOWED_AFTER_SEALED
from java_checkstyle.grammar.token_set import MODIFIER_TOKENS
from java_checkstyle.lexical import LexicalFSM
from java_checkstyle.lexical import Token
from java_checkstyle.lexical import TokenKind

__all__ = [
    "JavaSyntaxError",
    "JavaParser",
]


class JavaSyntaxError(Exception):
    """Java 语法错误"""


class JavaParser:
    """
    【对应 JDK 源码位置】
    https://github.com/openjdk/jdk/blob/master/src/jdk.compiler/share/classes/com/sun/tools/javac/parser/JavacParser.java
    """

    def __init__(self, lexer: LexicalFSM, file_name: Optional[str] = None):
        self.text = lexer.text
        self.lexer = lexer
        self.file_name = file_name
        self.last_token: Optional[Token] = None  # 上一个 Token
        self.token: Token = self.lexer.lex()  # 当前 Token

    def next_token(self):
        self.last_token = self.token
        self.token = self.lexer.lex()

    def peek_token(self, lookahead: int, *kinds: TokenKind) -> bool:
        """检查从当前位置之后的第 lookahead 个元素之后的元素与 kinds 是否匹配"""
        for i, kind in enumerate(kinds):
            if self.lexer.token(lookahead + i + 1).kind != kind:
                return False
        return True

    def accept(self, kind: TokenKind):
        if self.token.kind == kind:
            self.next_token()
        else:
            self.syntax_error(self.token, f"expect {kind.name}, but get {self.token.kind.name}")

    def _info_exclude(self, start_pos: Optional[int]) -> Dict[str, Any]:
        """根据开始位置 start_pos 和当前 token 的开始位置（即不包含当前 token），获取当前节点的源代码和位置信息"""
        if start_pos is None:
            return {"source": None, "start_pos": None, "end_pos": None}
        end_pos = self.last_token.end_pos
        return {
            "source": self.text[start_pos: end_pos],
            "start_pos": start_pos,
            "end_pos": end_pos
        }

    # ------------------------------ 报错信息相关方法 ------------------------------

    def syntax_error(self, token: Token, message: str):
        """报告语法错误"""
        raise JavaSyntaxError(f"报告语法错误: line={token.line}, column={token.column}, message={message}")

    # ------------------------------ 编译单元 ------------------------------

    def parse_compilation_unit(self) -> ast.CompilationUnitTree:
        """解析编译单元，收集其中所有的修饰符子句

        Examples
        --------
        >>> tree = JavaParser(LexicalFSM("public class A { private static final int B = 1; }")).parse_compilation_unit()
        >>> [modifiers.generate() for modifiers in tree.modifiers]
        ['public', 'private static final']
        """
        modifiers: List[ast.ModifiersTree] = []
        while self.token.kind != TokenKind.EOF:
            if self.is_modifiers_start():
                modifiers.append(self.modifiers_opt())
            else:
                self.next_token()
        return ast.CompilationUnitTree.create(
            file_name=self.file_name,
            modifiers=modifiers,
            source=self.text,
            start_pos=0,
            end_pos=len(self.text)
        )

    # ------------------------------ 标识符 ------------------------------

    def ident(self) -> str:
        """标识符的名称

        Examples
        --------
        >>> JavaParser(LexicalFSM("abc")).ident()
        'abc'
        """
        if self.token.kind == TokenKind.IDENTIFIER:
            name = self.token.name
            self.next_token()
            return name
        self.syntax_error(self.token, f"{self.token.source} 不能作为 Identifier")

    def qualident(self) -> str:
        """多个用 DOT 分隔的标识符

        Examples
        --------
        >>> JavaParser(LexicalFSM("java.lang.Override")).qualident()
        'java.lang.Override'
        """
        names = [self.ident()]
        while self.token.kind == TokenKind.DOT:
            self.next_token()
            names.append(self.ident())
        return ".".join(names)

    def skip_parens(self):
        """跳过当前位置的一对括号（包括其中嵌套的括号）"""
        start = self.token
        depth = 0
        while True:
            tk = self.token.kind
            if tk == TokenKind.EOF:
                self.syntax_error(start, "括号没有闭合")
            self.next_token()
            if tk == TokenKind.LPAREN:
                depth += 1
            elif tk == TokenKind.RPAREN:
                depth -= 1
                if depth == 0:
                    return

    # ------------------------------ 修饰符 ------------------------------

    def is_modifiers_start(self) -> bool:
        """当前 Token 是否为修饰符子句的开始"""
        tk = self.token.kind
        if tk in MODIFIER_TOKENS:
            return self.is_modifier_flag(in_clause=False)
        if tk == TokenKind.MONKEYS_AT:
            return self.lexer.token(1).kind != TokenKind.INTERFACE
        if tk == TokenKind.IDENTIFIER:
            return self.is_non_sealed_class_start() or self.is_sealed_class_start()
        return False

    def is_modifier_flag(self, in_clause: bool) -> bool:
        """当前的修饰符关键字是否作为修饰符使用

        以下场景中的关键字不是修饰符：
        - synchronized (lock) { ... }：同步代码块
        - static { ... }：静态初始化代码块
        - import static ...：静态引用
        - default: 和 default ->：switch 语句的默认分支
        - String value() default "";：注解类型元素的默认值

        Examples
        --------
        >>> JavaParser(LexicalFSM("synchronized (lock)")).is_modifier_flag(False)
        False
        >>> JavaParser(LexicalFSM("synchronized void")).is_modifier_flag(False)
        True
        """
        tk = self.token.kind
        next_kind = self.lexer.token(1).kind
        if tk == TokenKind.SYNCHRONIZED:
            return next_kind != TokenKind.LPAREN
        if tk == TokenKind.STATIC:
            if self.last_token is not None and self.last_token.kind == TokenKind.IMPORT:
                return False
            return next_kind != TokenKind.LBRACE
        if tk == TokenKind.DEFAULT:
            if next_kind in {TokenKind.COLON, TokenKind.ARROW}:
                return False
            if (not in_clause
                    and self.last_token is not None
                    and self.last_token.kind in {TokenKind.RPAREN, TokenKind.RBRACKET}):
                return False
        return True

    def modifiers_opt(self) -> ast.ModifiersTree:
        """修饰词

        [JDK Document] https://docs.oracle.com/javase/specs/jls/se22/html/jls-19.html
        ClassModifier:
          (one of)
          Annotation public protected private
          abstract static final sealed non-sealed strictfp

        FieldModifier:
          (one of)
          Annotation public protected private
          static final transient volatile

        MethodModifier:
          (one of)
          Annotation public protected private
          abstract static final synchronized native strictfp

        InterfaceMethodModifier:
          (one of)
          Annotation public private
          abstract default static strictfp

        [JDK Code] JavacParser.modifiersOpt
        ModifiersOpt = { Modifier }
        Modifier = PUBLIC | PROTECTED | PRIVATE | STATIC | ABSTRACT | FINAL
                 | NATIVE | SYNCHRONIZED | TRANSIENT | VOLATILE | "@"
                 | "@" Annotation

        与 javac 不同，重复的修饰符不会被视为语法错误，而是原样保留，由检查规则处理。

        Examples
        --------
        >>> JavaParser(LexicalFSM("non-sealed class")).modifiers_opt().generate()
        'non-sealed'
        >>> JavaParser(LexicalFSM("public static final NUMBER")).modifiers_opt().generate()
        'public static final'
        >>> JavaParser(LexicalFSM("@Override public void")).modifiers_opt().generate()
        '@Override public'
        """
        pos = self.token.pos
        flags: List[ast.ModifierTree] = []
        annotations: List[ast.AnnotationTree] = []

        while True:
            tk = self.token.kind
            in_clause = len(flags) > 0 or len(annotations) > 0
            if tk in MODIFIER_TOKENS and self.is_modifier_flag(in_clause):
                flags.append(ast.ModifierTree.create(
                    text=self.token.source,
                    line=self.token.line,
                    column=self.token.column,
                    source=self.token.source,
                    start_pos=self.token.pos,
                    end_pos=self.token.end_pos
                ))
                self.next_token()
            elif tk == TokenKind.MONKEYS_AT and self.lexer.token(1).kind != TokenKind.INTERFACE:
                annotations.append(self.annotation())
            elif tk == TokenKind.IDENTIFIER and self.is_non_sealed_class_start():
                start = self.token
                self.next_token()
                self.next_token()
                self.next_token()
                flags.append(ast.ModifierTree.create(
                    text="non-sealed",
                    line=start.line,
                    column=start.column,
                    **self._info_exclude(start.pos)
                ))
            elif tk == TokenKind.IDENTIFIER and self.is_sealed_class_start():
                flags.append(ast.ModifierTree.create(
                    text=self.token.source,
                    line=self.token.line,
                    column=self.token.column,
                    source=self.token.source,
                    start_pos=self.token.pos,
                    end_pos=self.token.end_pos
                ))
                self.next_token()
            else:
                break

        return ast.ModifiersTree.create(
            flags=flags,
            annotations=annotations,
            **self._info_exclude(pos)
        )

    def annotation(self) -> ast.AnnotationTree:
        """注解

        [JDK Code] JavacParser.annotation
        Annotation = "@" Qualident [ "(" AnnotationFieldValues ")" ]

        注解的参数不被解析，只跳过其中的括号。

        Examples
        --------
        >>> JavaParser(LexicalFSM("@SuppressWarnings(value = {\\"a\\"}) int")).annotation().name
        'SuppressWarnings'
        """
        start = self.token
        self.accept(TokenKind.MONKEYS_AT)
        name = self.qualident()
        if self.token.kind == TokenKind.LPAREN:
            self.skip_parens()
        return ast.AnnotationTree.create(
            name=name,
            line=start.line,
            column=start.column,
            **self._info_exclude(start.pos)
        )

    def is_non_sealed_class_start(self) -> bool:
        """如果从当前 Token 开始为 non-sealed 关键字则返回 True，否则返回 False

        [JDK Code] JavacParser.isNonSealedClassStart

        Examples
        --------
        >>> JavaParser(LexicalFSM("non-sealed class")).is_non_sealed_class_start()
        True
        >>> JavaParser(LexicalFSM("non-sealed function")).is_non_sealed_class_start()
        False
        """
        return (self.is_non_sealed_identifier(self.token, 0)
                and self.allowed_after_sealed_or_non_sealed(3, True))

    def is_non_sealed_identifier(self, some_token: Token, lookahead: int) -> bool:
        """判断第 lookahead 个 Token（即 some_token）开始是否为 non-sealed 关键字

        [JDK Code] JavacParser.isNonSealedIdentifier
        """
        if some_token.name == "non" and self.peek_token(lookahead, TokenKind.SUB, TokenKind.IDENTIFIER):
            token_sub: Token = self.lexer.token(lookahead + 1)
            token_sealed: Token = self.lexer.token(lookahead + 2)
            return (some_token.end_pos == token_sub.pos
                    and token_sub.end_pos == token_sealed.pos
                    and token_sealed.name == "sealed")
        return False

    def is_sealed_class_start(self) -> bool:
        """如果当前 Token 为 sealed 关键字则返回 True，否则返回 False

        [JDK Code] JavacParser.isSealedClassStart

        Examples
        --------
        >>> JavaParser(LexicalFSM("sealed class")).is_sealed_class_start()
        True
        >>> JavaParser(LexicalFSM("sealed = true")).is_sealed_class_start()
        False
        """
        return (self.token.name == "sealed"
                and self.allowed_after_sealed_or_non_sealed(1, False))

    def allowed_after_sealed_or_non_sealed(self, lookahead: int, current_is_non_sealed: bool) -> bool:
        """检查第 lookahead 个 Token 是否可以出现在 sealed 关键字或 non-sealed 关键字之后

        [JDK Code] JavacParser.allowedAfterSealedOrNonSealed
        """
        next_token = self.lexer.token(lookahead)
        tk = next_token.kind
        if tk == TokenKind.MONKEYS_AT:
            return self.lexer.token(lookahead + 1).kind != TokenKind.INTERFACE or current_is_non_sealed
        if tk in ALLOWED_AFTER_SEALED:
            return True
        if tk == TokenKind.IDENTIFIER:
            return self.is_non_sealed_identifier(next_token, lookahead) or next_token.name == "sealed"
        return False
