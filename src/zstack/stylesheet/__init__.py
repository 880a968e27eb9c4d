from zstack.stylesheet.parser import extract_rules
from zstack.stylesheet.model import (
    DEFAULT_VALUE,
    RECOGNIZED_PROPERTIES,
    RuleRecord,
    SourceSpan,
)

__all__ = [
    "extract_rules",
    "RuleRecord",
    "SourceSpan",
    "RECOGNIZED_PROPERTIES",
    "DEFAULT_VALUE",
]
