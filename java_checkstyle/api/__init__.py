"""
检查规则接口
"""

from java_checkstyle.api.check import Check
from java_checkstyle.api.localized_message import LocalizedMessage, MessageCollector, SeverityLevel
from java_checkstyle.api.messages import MESSAGES
