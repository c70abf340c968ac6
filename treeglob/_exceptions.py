import enum


class SyntaxRule(enum.Enum):
    """The grammar rule a malformed pattern violated."""

    EMPTY_SEGMENT = "empty segment (leading, trailing or doubled separator)"
    DANGLING_ESCAPE = "dangling escape at end of pattern"
    RECURSIVE_MIXED = "'**' combined with other characters in one segment"
    ADJACENT_WILDCARDS = "'*' directly adjacent to another wildcard"
    UNTERMINATED_CLASS = "unterminated character class"
    EMPTY_CLASS = "empty character class"
    MISPLACED_DASH = "unescaped '-' at the start or end of a class member"
    BAD_RANGE = "character range low bound exceeds high bound"


class PatternSyntaxError(ValueError):
    """Raised when a glob pattern cannot be compiled. Subclass of ValueError."""
    def __init__(self, rule: SyntaxRule, pattern: str, position: int) -> None:
        self.rule = rule
        self.pattern = pattern
        self.position = position
        super().__init__(
            f"bad glob pattern {pattern!r} at offset {position}: {rule.value}"
        )

