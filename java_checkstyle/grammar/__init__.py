"""
语法解析
"""

from java_checkstyle.grammar.parser import JavaParser, JavaSyntaxError
