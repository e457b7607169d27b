"""
Code emitters: render a ProtocolSpec into one source file per target.

Every emitter walks the methods in document order, builds the same doc
comment text, maps types through the per-target table and differs only in
surface syntax.
"""

from typing import Callable, Dict, List

from .schema import MethodSpec, ProtocolSpec, UnsupportedTargetError
from .types import map_type

DEFAULT_BRIDGE_NAME = "JsBridge"


# -- Shared helpers --

def _header(spec: ProtocolSpec) -> str:
    return (f"// Generated from {spec.source} (version {spec.version}). "
            f"Do not edit manually.")


def doc_text(method: MethodSpec) -> str:
    """Description plus @since / @returns tags, empty parts dropped."""
    tags = []
    if method.min_version is not None:
        tags.append(f"@since {method.min_version}")
    if method.returns.desc:
        tags.append(f"@returns {method.returns.desc}")
    return "\n".join(part for part in [method.desc, *tags] if part)


def doc_block(text: str, indent: str = "") -> List[str]:
    """Wrap text in a /** ... */ block; empty text yields no lines."""
    if not text:
        return []
    lines = [f"{indent}/**"]
    lines.extend(f"{indent} * {line}" for line in text.split("\n"))
    lines.append(f"{indent} */")
    return lines


def _join_methods(blocks: List[List[str]]) -> List[str]:
    """Flatten per-method line blocks with a blank line between them."""
    lines: List[str] = []
    for i, block in enumerate(blocks):
        if i:
            lines.append("")
        lines.extend(block)
    return lines


# -- TypeScript --

def _ts_method(m: MethodSpec) -> List[str]:
    params = ", ".join(f"{p.name}: {map_type('ts', p.type)}" for p in m.params)
    ret = map_type("ts", m.returns.type)
    return doc_block(doc_text(m), "  ") + [f"  {m.name}({params}): {ret};"]


def emit_ts(spec: ProtocolSpec, bridge_name: str = DEFAULT_BRIDGE_NAME) -> str:
    """Generate a TypeScript declaration file with the bridge interface."""
    lines = [
        _header(spec),
        f"export interface {bridge_name} {{",
    ]
    lines.extend(_join_methods([_ts_method(m) for m in spec.methods]))
    lines.extend([
        "}",
        "",
        f'export const VERSION = "{spec.version}";',
        "",
    ])
    return "\n".join(lines)


# -- JavaScript --

def _js_method(m: MethodSpec) -> List[str]:
    params = ", ".join(p.name for p in m.params)
    return doc_block(doc_text(m), "  ") + [
        f"  {m.name}({params}) {{",
        "    throw new Error('Not implemented');",
        "  }",
    ]


def emit_js(spec: ProtocolSpec, bridge_name: str = DEFAULT_BRIDGE_NAME) -> str:
    """Generate a CommonJS stub class whose methods all throw."""
    lines = [
        _header(spec),
        f"class {bridge_name} {{",
        f'  static VERSION = "{spec.version}";',
        "",
    ]
    lines.extend(_join_methods([_js_method(m) for m in spec.methods]))
    lines.extend([
        "}",
        "",
        f"module.exports = {bridge_name};",
        "",
    ])
    return "\n".join(lines)


# -- Java --

def _java_method(m: MethodSpec) -> List[str]:
    params = ", ".join(f"{map_type('java', p.type)} {p.name}" for p in m.params)
    ret = map_type("java", m.returns.type)
    return doc_block(doc_text(m), "  ") + [f"  {ret} {m.name}({params});"]


def emit_java(spec: ProtocolSpec, bridge_name: str = DEFAULT_BRIDGE_NAME) -> str:
    lines = [
        _header(spec),
        f"public interface {bridge_name} {{",
        f'  String VERSION = "{spec.version}";',
        "",
    ]
    lines.extend(_join_methods([_java_method(m) for m in spec.methods]))
    lines.extend([
        "}",
        "",
    ])
    return "\n".join(lines)


# -- Objective-C --

def _objc_method(m: MethodSpec) -> List[str]:
    text = doc_text(m)
    doc = [f"/// {line}".rstrip() for line in text.split("\n")] if text else []
    ret = map_type("objc", m.returns.type)

    if not m.params:
        return doc + [f"- ({ret}){m.name};"]

    # Selector pieces: the method name labels the first argument, every
    # following argument is labelled by its own name.
    first, rest = m.params[0], m.params[1:]
    parts = [f"- ({ret}){m.name}:({map_type('objc', first.type)}){first.name}"]
    parts.extend(f"{p.name}:({map_type('objc', p.type)}){p.name}" for p in rest)
    return doc + [" ".join(parts) + ";"]


def emit_objc(spec: ProtocolSpec, bridge_name: str = DEFAULT_BRIDGE_NAME) -> str:
    """Generate an Objective-C header declaring the bridge protocol."""
    lines = [
        _header(spec),
        "#import <Foundation/Foundation.h>",
        "",
        "NS_ASSUME_NONNULL_BEGIN",
        "",
        f'#define {bridge_name.upper()}_VERSION @"{spec.version}"',
        "",
        f"@protocol {bridge_name}",
    ]
    lines.extend(_join_methods([_objc_method(m) for m in spec.methods]))
    lines.extend([
        "@end",
        "",
        "NS_ASSUME_NONNULL_END",
        "",
    ])
    return "\n".join(lines)


# -- C / C++ --

def _cpp_method(m: MethodSpec, bridge_name: str) -> List[str]:
    params = ", ".join(f"{map_type('cpp', p.type)} {p.name}" for p in m.params)
    ret = map_type("cpp", m.returns.type)
    return doc_block(doc_text(m)) + [
        f"{ret} {bridge_name}_{m.name}({params or 'void'});"
    ]


def emit_cpp(spec: ProtocolSpec, bridge_name: str = DEFAULT_BRIDGE_NAME) -> str:
    """Generate a C header usable from both C and C++ translation units."""
    guard = f"{bridge_name.upper()}_HPP"
    lines = [
        _header(spec),
        f"#ifndef {guard}",
        f"#define {guard}",
        "",
        "#include <stdint.h>",
        "#include <stdbool.h>",
        "",
        f'#define {bridge_name.upper()}_VERSION "{spec.version}"',
        "",
        "#ifdef __cplusplus",
        'extern "C" {',
        "#endif",
        "",
    ]
    lines.extend(_join_methods([_cpp_method(m, bridge_name) for m in spec.methods]))
    lines.extend([
        "",
        "#ifdef __cplusplus",
        "}",
        "#endif",
        "",
        f"#endif // {guard}",
        "",
    ])
    return "\n".join(lines)


# -- Dispatch --

EMITTERS: Dict[str, Callable[[ProtocolSpec, str], str]] = {
    "ts":   emit_ts,
    "js":   emit_js,
    "java": emit_java,
    "objc": emit_objc,
    "cpp":  emit_cpp,
}


def emit(target: str, spec: ProtocolSpec,
         bridge_name: str = DEFAULT_BRIDGE_NAME) -> str:
    """Render ``spec`` for a single target id."""
    try:
        emitter = EMITTERS[target]
    except KeyError:
        raise UnsupportedTargetError(f"No emitter for target {target!r}",
                                     [target]) from None
    return emitter(spec, bridge_name)
