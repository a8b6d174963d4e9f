from designcode.core.codegen.generator import (
    CodeGenerator,
    DesignCodeError,
    MissingRequiredFieldsError,
)
from designcode.core.codegen.pattern import (
    LiteralText,
    PatternCompiler,
    Placeholder,
    parse_pattern,
    render,
)
from designcode.core.codegen.validation import FieldValidator

__all__ = [
    "CodeGenerator",
    "DesignCodeError",
    "FieldValidator",
    "LiteralText",
    "MissingRequiredFieldsError",
    "PatternCompiler",
    "Placeholder",
    "parse_pattern",
    "render",
]
