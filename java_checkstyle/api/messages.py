"""
检查结果的消息模板
"""

__all__ = [
    "MESSAGES"
]

# 消息标识符到消息模板的映射（模板中的 {0}、{1} 等为消息参数）
MESSAGES = {
    "mod.order": "'{0}' modifier out of order with the JLS suggestions.",
    "general.exception": "Got an exception - {0}",
}
