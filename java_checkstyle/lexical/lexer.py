"""
词法解析器的有限状态自动机

https://docs.oracle.com/javase/specs/jls/se22/html/jls-3.html
"""

import abc
import bisect
import enum
from typing import Dict, List, Optional, Tuple

from java_checkstyle.lexical.charset import DEFAULT, END_CHAR, END_WORD, NUMBER, NUMBER_PART
from java_checkstyle.lexical.keyword import KEYWORD_HASH
from java_checkstyle.lexical.state import LexicalState
from java_checkstyle.lexical.token_kind import TokenKind

__all__ = [
    "AffiliationStyle",
    "Affiliation",
    "Token",
    "JavaLexicalError",
    "LexicalFSM",
]


class JavaLexicalError(Exception):
    """Java 词法错误"""

    def __init__(self, message: str, pos: int, line: int, column: int):
        super().__init__(f"{message}: line={line}, column={column}")
        self.pos = pos
        self.line = line
        self.column = column


class AffiliationStyle(enum.IntEnum):
    """附属元素的类型"""

    SPACE = enum.auto()  # 空格、制表符、换页符
    LINEBREAK = enum.auto()  # 换行符
    COMMENT_LINE = enum.auto()  # 以 // 开头的注释
    COMMENT_BLOCK = enum.auto()  # 以 /* 开头的注释
    JAVADOC_BLOCK = enum.auto()  # 以 /** 开头的注释


class Affiliation:
    """附属元素：包括空格、换行符和注释

    附属元素不参与语法解析，但会被挂载到它之后的第一个终结符上，从而使检查规则能够在需要时访问注释和空白。
    """

    __slots__ = ("_style", "_pos", "_end_pos", "_text")

    def __init__(self, style: AffiliationStyle, pos: int, end_pos: int, text: str):
        self._style = style
        self._pos = pos
        self._end_pos = end_pos
        self._text = text

    @property
    def style(self) -> AffiliationStyle:
        return self._style

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def end_pos(self) -> int:
        return self._end_pos

    @property
    def text(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{self.style.name}({self.text!r})"


class Token:
    """语法元素"""

    __slots__ = ("_kind", "_pos", "_end_pos", "_line", "_column", "_affiliations", "_source")

    def __init__(self, kind: TokenKind, pos: int, end_pos: int, line: int, column: int,
                 affiliations: List[Affiliation], source: Optional[str]):
        """

        Parameters
        ----------
        kind : TokenKind
            语法元素类型
        pos : int
            语法元素开始位置（包含）
        end_pos : int
            语法元素结束位置（不包含）
        line : int
            语法元素开始位置所在的行号（从 1 开始）
        column : int
            语法元素开始位置所在的列号（从 1 开始）
        affiliations : List[Affiliation]
            语法元素之前的附属元素
        source : Optional[str]
            语法元素的源代码；当前仅当当前语法元素为结束符时源代码为 None
        """
        self._kind = kind
        self._pos = pos
        self._end_pos = end_pos
        self._line = line
        self._column = column
        self._affiliations = affiliations
        self._source = source

    @property
    def kind(self) -> TokenKind:
        return self._kind

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def end_pos(self) -> int:
        return self._end_pos

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def affiliations(self) -> List[Affiliation]:
        return self._affiliations

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def name(self) -> Optional[str]:
        """标识符的名称"""
        return self._source

    @property
    def is_end(self) -> bool:
        return self._kind == TokenKind.EOF

    def __repr__(self) -> str:
        return f"{self.kind.name}({self.source})"


class LexicalFSM:
    """词法解析器自动机

    lex() 每次将当前终结符向后移动一个并返回；token(lookahead) 返回当前终结符之后第 lookahead 个终结符（0 为当前终结符），
    预读的终结符被缓存在 _buffer 中。
    """

    __slots__ = ("_text", "_length", "_line_starts", "pos_start", "pos", "state", "affiliations", "_buffer",
                 "_started")

    def __init__(self, text: str):
        self._text: str = text  # Unicode 字符串
        self._length: int = len(self._text)  # Unicode 字符串长度
        self._line_starts: List[int] = [0] + [i + 1 for i, ch in enumerate(text) if ch == "\n"]  # 每一行的开始位置

        self.pos_start: int = 0  # 当前词语开始的指针位置
        self.pos: int = 0  # 当前指针位置
        self.state: LexicalState = LexicalState.INIT  # 自动机状态
        self.affiliations: List[Affiliation] = []  # 还没有写入 Token 的附属元素的列表

        self._buffer: List[Token] = []  # 已解析但尚未被 lex() 越过的终结符（第 0 个为当前终结符）
        self._started: bool = False  # 是否已经调用过 lex()

    @property
    def text(self) -> str:
        return self._text

    @property
    def length(self) -> int:
        return self._length

    def position(self, pos: int) -> Tuple[int, int]:
        """将字符位置转换为行号和列号（均从 1 开始）

        Examples
        --------
        >>> LexicalFSM("ab\\ncd").position(4)
        (2, 2)
        """
        line_idx = bisect.bisect_right(self._line_starts, pos) - 1
        return line_idx + 1, pos - self._line_starts[line_idx] + 1

    # ------------------------------ Unicode 字符串迭代器 ------------------------------

    def _char(self) -> str:
        """返回当前字符"""
        if self.pos == self._length:
            return END_CHAR
        return self._text[self.pos]

    # ------------------------------ 工具函数 ------------------------------

    def get_word(self) -> str:
        """根据当前词语开始的指针位置和当前指针位置，截取当前词语"""
        return self._text[self.pos_start: self.pos]

    def pop_affiliation(self) -> List[Affiliation]:
        """获取当前词语之前的附属元素"""
        res = self.affiliations
        self.affiliations = []
        return res

    def create_token(self, kind: TokenKind, source: Optional[str] = None) -> Token:
        """将当前词语规约为终结符，并将当前词语开始位置移动到当前指针位置"""
        if source is None:
            source = self.get_word()
        line, column = self.position(self.pos_start)
        token = Token(kind=kind, pos=self.pos_start, end_pos=self.pos, line=line, column=column,
                      affiliations=self.pop_affiliation(), source=source)
        self.pos_start = self.pos
        return token

    def create_affiliation(self, style: AffiliationStyle) -> None:
        """将当前词语规约为附属元素，并将当前词语开始位置移动到当前指针位置"""
        self.affiliations.append(Affiliation(style=style, pos=self.pos_start, end_pos=self.pos, text=self.get_word()))
        self.pos_start = self.pos

    def error(self, message: str) -> JavaLexicalError:
        """构造以当前词语开始位置为位置的词法错误"""
        line, column = self.position(self.pos_start)
        return JavaLexicalError(message, pos=self.pos_start, line=line, column=column)

    # ------------------------------ 词法解析主逻辑 ------------------------------

    def _next_token(self) -> Token:
        """解析并生成一个终结符"""
        while True:
            char = self._char()

            operate: Optional["Operator"] = FSM_OPERATION_MAP.get((self.state, char))

            if operate is None:
                # 如果没有则使用当前状态的默认处理规则
                operate: "Operator" = FSM_OPERATION_MAP_DEFAULT[self.state]

            res: Optional[Token] = operate(self)
            if res is not None:
                return res

    def token(self, lookahead: int = 0) -> Token:
        """返回当前终结符之后第 lookahead 个终结符

        Examples
        --------
        >>> LexicalFSM("public static").token(1)
        STATIC(static)
        """
        while len(self._buffer) <= lookahead:
            self._buffer.append(self._next_token())
        return self._buffer[lookahead]

    def lex(self) -> Token:
        """将当前终结符向后移动一个，并返回新的当前终结符；第一次调用时返回第一个终结符

        Examples
        --------
        >>> lexer = LexicalFSM("int a")
        >>> lexer.lex(), lexer.lex(), lexer.lex()
        (INT(int), IDENTIFIER(a), EOF(None))
        """
        if self._started and self._buffer:
            self._buffer.pop(0)
        self._started = True
        return self.token(0)

    def __repr__(self) -> str:
        return f"<LexicalFSM state={self.state.name}, pos={self.pos}>"


class Operator(abc.ABC):
    """执行逻辑的抽象基类"""

    @abc.abstractmethod
    def __call__(self, fsm: LexicalFSM) -> Optional[Token]:
        """执行逻辑"""


class Shift(Operator):
    """【移动指针】移进操作"""

    def __call__(self, fsm: LexicalFSM) -> None:
        fsm.pos += 1


class ShiftSetState(Operator):
    """【移动指针】移进操作 + 设置状态"""

    def __init__(self, state: LexicalState):
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> None:
        fsm.state = self._state
        fsm.pos += 1


class ReduceSetState(Operator):
    """【不移动指针】结束规约操作"""

    def __init__(self, kind: TokenKind, state: LexicalState):
        self._kind = kind
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.state = self._state
        return fsm.create_token(self._kind)


class ReduceNumberSetState(Operator):
    """【不移动指针】将当前单词作为数值字面值，根据前缀和后缀判断字面值类型，执行规约操作"""

    def __init__(self, state: LexicalState):
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.state = self._state
        return fsm.create_token(self.number_kind(fsm.get_word()))

    @staticmethod
    def number_kind(source: str) -> TokenKind:
        """根据数值字面值的源代码判断字面值类型

        Examples
        --------
        >>> ReduceNumberSetState.number_kind("0xFFL").name
        'LONG_LITERAL'
        >>> ReduceNumberSetState.number_kind("1e-5f").name
        'FLOAT_LITERAL'
        """
        text = source.lower()
        if text.endswith("l"):
            return TokenKind.LONG_LITERAL
        if text.startswith("0x"):
            if "p" not in text:
                return TokenKind.INT_LITERAL
            return TokenKind.FLOAT_LITERAL if text.endswith("f") else TokenKind.DOUBLE_LITERAL
        if text.endswith("f"):
            return TokenKind.FLOAT_LITERAL
        if text.endswith("d") or "." in text or "e" in text:
            return TokenKind.DOUBLE_LITERAL
        return TokenKind.INT_LITERAL


class ReduceSetStateMaybeKeyword(Operator):
    """【不移动指针】结束规约操作，尝试将当前词语解析为关键词"""

    def __init__(self, state: LexicalState):
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.state = self._state
        return fsm.create_token(KEYWORD_HASH.get(fsm.get_word(), TokenKind.IDENTIFIER))


class MoveReduceSetState(Operator):
    """【移动指针】结束规约操作"""

    def __init__(self, kind: TokenKind, state: LexicalState):
        self._kind = kind
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.state = self._state
        fsm.pos += 1
        return fsm.create_token(self._kind)


class CommentSetState(Operator):
    """【不移动指针】将当前元素作为附属元素，进行规约操作"""

    def __init__(self, style: AffiliationStyle, state: LexicalState):
        self._style = style
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> None:
        fsm.state = self._state
        fsm.create_affiliation(self._style)


class MoveComment(Operator):
    """【移动指针】将当前元素作为附属元素，进行规约操作"""

    def __init__(self, style: AffiliationStyle):
        self._style = style

    def __call__(self, fsm: LexicalFSM) -> None:
        fsm.pos += 1
        fsm.create_affiliation(self._style)


class MoveBlockCommentSetState(Operator):
    """【移动指针】将当前多行注释作为附属元素，进行规约操作；以 /** 开头的注释视为 Javadoc"""

    def __init__(self, state: LexicalState):
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> None:
        fsm.state = self._state
        fsm.pos += 1
        source = fsm.get_word()
        if source.startswith("/**") and source != "/**/":
            fsm.create_affiliation(AffiliationStyle.JAVADOC_BLOCK)
        else:
            fsm.create_affiliation(AffiliationStyle.COMMENT_BLOCK)


class FixedSetState(Operator):
    """【不移动指针】结束固定操作"""

    def __init__(self, kind: TokenKind, source: str, state: LexicalState):
        self._kind = kind
        self._source = source
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.state = self._state
        return fsm.create_token(self._kind, source=self._source)


class MoveFixed(Operator):
    """【移动指针】结束固定操作"""

    def __init__(self, kind: TokenKind, source: str):
        self._kind = kind
        self._source = source

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.pos += 1
        return fsm.create_token(self._kind, source=self._source)


class MoveFixedSetState(Operator):
    """【移动指针】结束固定操作 + 设置状态"""

    def __init__(self, kind: TokenKind, source: str, state: LexicalState):
        self._kind = kind
        self._source = source
        self._state = state

    def __call__(self, fsm: LexicalFSM) -> Token:
        fsm.state = self._state
        fsm.pos += 1
        return fsm.create_token(self._kind, source=self._source)


class Error(Operator):
    """【异常】"""

    def __init__(self, message: str):
        self._message = message

    def __call__(self, fsm: LexicalFSM):
        raise fsm.error(self._message)


class Finish(Operator):
    """【结束】"""

    def __call__(self, fsm: LexicalFSM) -> Token:
        line, column = fsm.position(fsm.length)
        return Token(kind=TokenKind.EOF, pos=fsm.length, end_pos=fsm.length, line=line, column=column,
                     affiliations=fsm.pop_affiliation(), source=None)


# 运算符的开始符号
OPERATOR = frozenset({"+", "-", "*", "/", "%", "=", "!", "<", ">", "&", "|", "^", "~", "?"})

# 行为映射表设置表（用于设置配置信息，输入参数允许是一个不可变集合）
FSM_OPERATION_MAP_SOURCE: Dict[LexicalState, Dict[object, Operator]] = {
    # 当前没有正在解析的词语
    LexicalState.INIT: {
        frozenset({" ", "\t", "\f"}): MoveComment(style=AffiliationStyle.SPACE),
        frozenset({"\n", "\r"}): MoveComment(style=AffiliationStyle.LINEBREAK),
        "{": MoveFixed(kind=TokenKind.LBRACE, source="{"),
        "}": MoveFixed(kind=TokenKind.RBRACE, source="}"),
        "[": MoveFixed(kind=TokenKind.LBRACKET, source="["),
        "]": MoveFixed(kind=TokenKind.RBRACKET, source="]"),
        "(": MoveFixed(kind=TokenKind.LPAREN, source="("),
        ")": MoveFixed(kind=TokenKind.RPAREN, source=")"),
        ".": ShiftSetState(state=LexicalState.DOT),
        ";": MoveFixed(kind=TokenKind.SEMI, source=";"),
        ":": ShiftSetState(state=LexicalState.CHAR_COLON),
        ",": MoveFixed(kind=TokenKind.COMMA, source=","),
        "@": MoveFixed(kind=TokenKind.MONKEYS_AT, source="@"),
        NUMBER: ShiftSetState(state=LexicalState.NUMBER),
        "'": ShiftSetState(state=LexicalState.IN_SINGLE_QUOTE),
        "\"": ShiftSetState(state=LexicalState.DOUBLE_QUOTE),
        "+": ShiftSetState(state=LexicalState.CHAR_ADD),
        "-": ShiftSetState(state=LexicalState.CHAR_SUB),
        "*": ShiftSetState(state=LexicalState.CHAR_MULT),
        "/": ShiftSetState(state=LexicalState.CHAR_DIV),
        "%": ShiftSetState(state=LexicalState.CHAR_MOD),
        "=": ShiftSetState(state=LexicalState.CHAR_EQUAL),
        "!": ShiftSetState(state=LexicalState.CHAR_EXCLAMATION),
        "<": ShiftSetState(state=LexicalState.CHAR_LESS),
        ">": ShiftSetState(state=LexicalState.CHAR_MORE),
        "&": ShiftSetState(state=LexicalState.CHAR_AND),
        "|": ShiftSetState(state=LexicalState.CHAR_OR),
        "^": ShiftSetState(state=LexicalState.CHAR_CARET),
        "~": MoveFixed(kind=TokenKind.TILDE, source="~"),
        "?": MoveFixed(kind=TokenKind.QUES, source="?"),
        END_CHAR: Finish(),
        DEFAULT: ShiftSetState(state=LexicalState.IDENT),
    },
    # 当前词语为不是特殊词语
    LexicalState.IDENT: {
        END_WORD: ReduceSetStateMaybeKeyword(state=LexicalState.INIT),
        OPERATOR: ReduceSetStateMaybeKeyword(state=LexicalState.INIT),
        END_CHAR: ReduceSetStateMaybeKeyword(state=LexicalState.INIT),
        DEFAULT: Shift(),
    },

    # -------------------- 数值字面值 --------------------
    LexicalState.NUMBER: {
        NUMBER_PART: Shift(),
        ".": Shift(),
        frozenset({"e", "E", "p", "P"}): ShiftSetState(state=LexicalState.NUMBER_EXP),
        DEFAULT: ReduceNumberSetState(state=LexicalState.INIT),
    },
    LexicalState.NUMBER_EXP: {
        frozenset({"+", "-"}): ShiftSetState(state=LexicalState.NUMBER),
        NUMBER_PART: ShiftSetState(state=LexicalState.NUMBER),
        DEFAULT: ReduceNumberSetState(state=LexicalState.INIT),
    },

    # -------------------- 字符字面值 --------------------
    LexicalState.IN_SINGLE_QUOTE: {
        "\\": ShiftSetState(state=LexicalState.IN_SINGLE_QUOTE_ESCAPE),
        "'": MoveReduceSetState(kind=TokenKind.CHAR_LITERAL, state=LexicalState.INIT),
        "\n": Error("unclosed char literal"),
        END_CHAR: Error("unclosed char literal"),
        DEFAULT: Shift(),
    },
    LexicalState.IN_SINGLE_QUOTE_ESCAPE: {
        END_CHAR: Error("unclosed char literal"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_SINGLE_QUOTE),
    },

    # -------------------- 字符串字面值 --------------------
    # "
    LexicalState.DOUBLE_QUOTE: {
        "\"": ShiftSetState(state=LexicalState.DOUBLE_QUOTE_2),
        "\\": ShiftSetState(state=LexicalState.IN_DOUBLE_QUOTE_ESCAPE),
        "\n": Error("unclosed string literal"),
        END_CHAR: Error("unclosed string literal"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_DOUBLE_QUOTE),
    },
    # ""（如果之后不是 " 则为空字符串）
    LexicalState.DOUBLE_QUOTE_2: {
        "\"": ShiftSetState(state=LexicalState.IN_TEXT_BLOCK),
        DEFAULT: ReduceSetState(kind=TokenKind.STRING_LITERAL, state=LexicalState.INIT),
    },
    LexicalState.IN_DOUBLE_QUOTE: {
        "\\": ShiftSetState(state=LexicalState.IN_DOUBLE_QUOTE_ESCAPE),
        "\"": MoveReduceSetState(kind=TokenKind.STRING_LITERAL, state=LexicalState.INIT),
        "\n": Error("unclosed string literal"),
        END_CHAR: Error("unclosed string literal"),
        DEFAULT: Shift(),
    },
    LexicalState.IN_DOUBLE_QUOTE_ESCAPE: {
        END_CHAR: Error("unclosed string literal"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_DOUBLE_QUOTE),
    },

    # -------------------- 文本块 --------------------
    LexicalState.IN_TEXT_BLOCK: {
        "\\": ShiftSetState(state=LexicalState.IN_TEXT_BLOCK_ESCAPE),
        "\"": ShiftSetState(state=LexicalState.TEXT_BLOCK_QUOTE),
        END_CHAR: Error("unclosed text block"),
        DEFAULT: Shift(),
    },
    LexicalState.IN_TEXT_BLOCK_ESCAPE: {
        END_CHAR: Error("unclosed text block"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_TEXT_BLOCK),
    },
    LexicalState.TEXT_BLOCK_QUOTE: {
        "\"": ShiftSetState(state=LexicalState.TEXT_BLOCK_QUOTE_2),
        "\\": ShiftSetState(state=LexicalState.IN_TEXT_BLOCK_ESCAPE),
        END_CHAR: Error("unclosed text block"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_TEXT_BLOCK),
    },
    LexicalState.TEXT_BLOCK_QUOTE_2: {
        "\"": MoveReduceSetState(kind=TokenKind.STRING_LITERAL, state=LexicalState.INIT),
        "\\": ShiftSetState(state=LexicalState.IN_TEXT_BLOCK_ESCAPE),
        END_CHAR: Error("unclosed text block"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_TEXT_BLOCK),
    },

    # -------------------- 多字符运算符 --------------------
    # +
    LexicalState.CHAR_ADD: {
        "=": MoveFixedSetState(kind=TokenKind.PLUS_EQ, source="+=", state=LexicalState.INIT),
        "+": MoveFixedSetState(kind=TokenKind.PLUS_PLUS, source="++", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.PLUS, source="+", state=LexicalState.INIT),
    },

    # -
    LexicalState.CHAR_SUB: {
        "=": MoveFixedSetState(kind=TokenKind.SUB_EQ, source="-=", state=LexicalState.INIT),
        "-": MoveFixedSetState(kind=TokenKind.SUB_SUB, source="--", state=LexicalState.INIT),
        ">": MoveFixedSetState(kind=TokenKind.ARROW, source="->", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.SUB, source="-", state=LexicalState.INIT),
    },

    # *
    LexicalState.CHAR_MULT: {
        "=": MoveFixedSetState(kind=TokenKind.STAR_EQ, source="*=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.STAR, source="*", state=LexicalState.INIT),
    },

    # /
    LexicalState.CHAR_DIV: {
        "=": MoveFixedSetState(kind=TokenKind.SLASH_EQ, source="/=", state=LexicalState.INIT),
        "/": ShiftSetState(state=LexicalState.IN_LINE_COMMENT),
        "*": ShiftSetState(state=LexicalState.IN_MULTI_COMMENT),
        DEFAULT: FixedSetState(kind=TokenKind.SLASH, source="/", state=LexicalState.INIT),
    },

    # %
    LexicalState.CHAR_MOD: {
        "=": MoveFixedSetState(kind=TokenKind.PERCENT_EQ, source="%=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.PERCENT, source="%", state=LexicalState.INIT),
    },

    # =
    LexicalState.CHAR_EQUAL: {
        "=": MoveFixedSetState(kind=TokenKind.EQ_EQ, source="==", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.EQ, source="=", state=LexicalState.INIT),
    },

    # :
    LexicalState.CHAR_COLON: {
        ":": MoveFixedSetState(kind=TokenKind.COLCOL, source="::", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.COLON, source=":", state=LexicalState.INIT),
    },

    # !
    LexicalState.CHAR_EXCLAMATION: {
        "=": MoveFixedSetState(kind=TokenKind.BANG_EQ, source="!=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.BANG, source="!", state=LexicalState.INIT),
    },

    # <
    LexicalState.CHAR_LESS: {
        "<": ShiftSetState(state=LexicalState.CHAR_LESS_LESS),
        "=": MoveFixedSetState(kind=TokenKind.LT_EQ, source="<=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.LT, source="<", state=LexicalState.INIT)
    },

    # <<
    LexicalState.CHAR_LESS_LESS: {
        "=": MoveFixedSetState(kind=TokenKind.LT_LT_EQ, source="<<=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.LT_LT, source="<<", state=LexicalState.INIT)
    },

    # >
    LexicalState.CHAR_MORE: {
        ">": ShiftSetState(state=LexicalState.CHAR_MORE_MORE),
        "=": MoveFixedSetState(kind=TokenKind.GT_EQ, source=">=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.GT, source=">", state=LexicalState.INIT)
    },

    # >>
    LexicalState.CHAR_MORE_MORE: {
        ">": ShiftSetState(state=LexicalState.CHAR_MORE_MORE_MORE),
        "=": MoveFixedSetState(kind=TokenKind.GT_GT_EQ, source=">>=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.GT_GT, source=">>", state=LexicalState.INIT),
    },

    # >>>
    LexicalState.CHAR_MORE_MORE_MORE: {
        "=": MoveFixedSetState(kind=TokenKind.GT_GT_GT_EQ, source=">>>=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.GT_GT_GT, source=">>>", state=LexicalState.INIT),
    },

    # &
    LexicalState.CHAR_AND: {
        "&": MoveFixedSetState(kind=TokenKind.AMP_AMP, source="&&", state=LexicalState.INIT),
        "=": MoveFixedSetState(kind=TokenKind.AMP_EQ, source="&=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.AMP, source="&", state=LexicalState.INIT),
    },

    # |
    LexicalState.CHAR_OR: {
        "|": MoveFixedSetState(kind=TokenKind.BAR_BAR, source="||", state=LexicalState.INIT),
        "=": MoveFixedSetState(kind=TokenKind.BAR_EQ, source="|=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.BAR, source="|", state=LexicalState.INIT),
    },

    # ^
    LexicalState.CHAR_CARET: {
        "=": MoveFixedSetState(kind=TokenKind.CARET_EQ, source="^=", state=LexicalState.INIT),
        DEFAULT: FixedSetState(kind=TokenKind.CARET, source="^", state=LexicalState.INIT),
    },

    # -------------------- 注释 --------------------
    # 在单行注释中（换行符不属于注释）
    LexicalState.IN_LINE_COMMENT: {
        frozenset({"\n", "\r"}): CommentSetState(style=AffiliationStyle.COMMENT_LINE, state=LexicalState.INIT),
        END_CHAR: CommentSetState(style=AffiliationStyle.COMMENT_LINE, state=LexicalState.INIT),
        DEFAULT: Shift()
    },

    # 在多行注释中
    LexicalState.IN_MULTI_COMMENT: {
        "*": ShiftSetState(state=LexicalState.IN_MULTI_COMMENT_STAR),
        END_CHAR: Error("unclosed comment"),
        DEFAULT: Shift()
    },

    # 在多行注释中的 * 之后
    LexicalState.IN_MULTI_COMMENT_STAR: {
        "*": Shift(),
        "/": MoveBlockCommentSetState(state=LexicalState.INIT),
        END_CHAR: Error("unclosed comment"),
        DEFAULT: ShiftSetState(state=LexicalState.IN_MULTI_COMMENT),
    },

    # -------------------- 特殊场景 --------------------
    # .
    LexicalState.DOT: {
        NUMBER: ShiftSetState(state=LexicalState.NUMBER),  # 当下一个字符是数字时，为浮点数
        ".": ShiftSetState(state=LexicalState.DOT_DOT),
        DEFAULT: FixedSetState(kind=TokenKind.DOT, source=".", state=LexicalState.INIT),  # 当下一个字符不是数字时，为类名或方法名
    },

    # ..
    LexicalState.DOT_DOT: {
        ".": MoveFixedSetState(kind=TokenKind.ELLIPSIS, source="...", state=LexicalState.INIT),
        DEFAULT: Error("illegal '..'"),
    },
}

# 状态行为映射表（用于用时行为映射信息，输入参数必须是一个字符）
FSM_OPERATION_MAP: Dict[Tuple[LexicalState, str], Operator] = {}
FSM_OPERATION_MAP_DEFAULT: Dict[LexicalState, Operator] = {}
for state_, operation_map in FSM_OPERATION_MAP_SOURCE.items():
    # 如果没有定义默认值，则默认其他字符为 Error
    if DEFAULT not in operation_map:
        FSM_OPERATION_MAP_DEFAULT[state_] = Error("illegal character")

    # 遍历并添加定义的字符到行为映射表中
    for ch_or_set, fsm_operation in operation_map.items():
        if ch_or_set is DEFAULT:
            FSM_OPERATION_MAP_DEFAULT[state_] = fsm_operation
        elif isinstance(ch_or_set, str):
            FSM_OPERATION_MAP[(state_, ch_or_set)] = fsm_operation
        elif isinstance(ch_or_set, frozenset):
            for ch in ch_or_set:
                FSM_OPERATION_MAP[(state_, ch)] = fsm_operation
        else:
            raise KeyError("非法的行为映射表设置表")

    # 将 ASCII 编码 20 - 7E 之间的字符添加到行为映射表中（从而令第一次查询的命中率提高，避免第二次查询）
    for dec in range(32, 127):
        ch = chr(dec)
        if (state_, ch) not in FSM_OPERATION_MAP:
            FSM_OPERATION_MAP[(state_, ch)] = FSM_OPERATION_MAP_DEFAULT[state_]
