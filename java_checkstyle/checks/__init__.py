"""
检查规则
"""

from typing import Dict, Type

from java_checkstyle.api import Check
from java_checkstyle.checks.modifier_order import JLS_ORDER, ModifierOrderCheck, check_order_suggested_by_jls

__all__ = [
    "CHECK_REGISTRY",
    "JLS_ORDER",
    "ModifierOrderCheck",
    "check_order_suggested_by_jls",
]

# 检查规则名称到检查规则类的映射
CHECK_REGISTRY: Dict[str, Type[Check]] = {
    "ModifierOrder": ModifierOrderCheck,
}
