"""
Type system: protocol-to-target type mapping.
"""

from .schema import UnsupportedTargetError

# Abstract protocol type names understood by every target.
ABSTRACT_TYPES = ("string", "boolean", "uint", "int", "double", "void")

# Target id → (protocol type name → target type token).
TYPE_MAP = {
    "ts": {
        "string":  "string",
        "boolean": "boolean",
        "uint":    "number",
        "int":     "number",
        "double":  "number",
        "void":    "void",
    },
    "java": {
        "string":  "String",
        "boolean": "boolean",
        "uint":    "long",
        "int":     "int",
        "double":  "double",
        "void":    "void",
    },
    "objc": {
        "string":  "NSString *",
        "boolean": "BOOL",
        "uint":    "NSUInteger",
        "int":     "NSInteger",
        "double":  "double",
        "void":    "void",
    },
    "cpp": {
        "string":  "const char *",
        "boolean": "bool",
        "uint":    "uint64_t",
        "int":     "int32_t",
        "double":  "double",
        "void":    "void",
    },
}

# JavaScript uses the TypeScript names; keep its own copy of the table.
TYPE_MAP["js"] = dict(TYPE_MAP["ts"])

# Token used when a protocol type has no entry in the target table.
FALLBACK = {
    "ts":   "any",
    "js":   "any",
    "java": "Object",
    "objc": "id",
    "cpp":  "void *",
}


def normalize_type(raw) -> str:
    """Trim whitespace and stray trailing commas; missing types become void.

    A type that trims down to nothing (e.g. ",") stays empty and so maps to
    the target fallback.
    """
    if not raw or not isinstance(raw, str):
        return "void"
    return raw.strip().rstrip(",").strip()


def map_type(target: str, raw) -> str:
    """Map a protocol type name to its token in ``target``."""
    if target not in TYPE_MAP:
        raise UnsupportedTargetError(f"No type table for target {target!r}",
                                     [target])
    return TYPE_MAP[target].get(normalize_type(raw), FALLBACK[target])
