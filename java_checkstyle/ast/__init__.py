"""
抽象语法树
"""

from java_checkstyle.ast.base import Tree
from java_checkstyle.ast.kind import TreeKind
from java_checkstyle.ast.node import *
