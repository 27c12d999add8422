"""Generation of the resource script and the C++ registry sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Tuple

DEFAULT_FIRST_ID = 100

_INDENT = "    "
_BYTES = "std::vector<uint8_t>"
_TEXT = "std::string"
_NAMESPACE = "moefx::resource"


def _block(head: str, body: Iterable[str], tail: str = "}") -> List[str]:
    """A braced block whose body is indented one level."""
    return [f"{head} {{", *(_INDENT + line if line else "" for line in body), tail]


def _join(*pieces: List[str]) -> List[str]:
    """Pieces separated by one blank line each."""
    lines: List[str] = []
    for piece in pieces:
        if lines:
            lines.append("")
        lines.extend(piece)
    return lines


def _guarded(condition: str, lines: List[str]) -> List[str]:
    return [f"#ifdef {condition}", "", *lines, "", "#endif"]


def _interface(name: str, data_type: str) -> List[str]:
    return _block(
        f"class {name}",
        ["public:", f"virtual ~{name}() = default;", "", f"virtual {data_type} get_data() = 0;"],
        "};",
    )


def _lazy_declaration(name: str, base: str, data_type: str) -> List[str]:
    return _block(
        f"class {name} : public {base}",
        [
            f"{data_type} data;",
            "bool loaded = false;",
            "ResourceInner inner;",
            "",
            "public:",
            f"explicit {name}(void* ctx);",
            "",
            f"{data_type} get_data() override;",
        ],
        "};",
    )


def _build_header() -> str:
    rc_class = _block(
        "class RcResource : public BinaryResource",
        [
            "int id;",
            "",
            "public:",
            "explicit RcResource(void* ctx);",
            "",
            f"{_BYTES} get_data() override;",
        ],
        "};",
    )
    void_cast = [
        "template <typename T>",
        *_block("void* void_cast(T&& x)", ["return reinterpret_cast<void *>(std::addressof(x));"]),
    ]
    handle = "std::shared_ptr<BinaryResource>"
    registry = _block(
        "class ResourceRegistry",
        [
            f"std::unordered_map<std::string, {handle}> registry;",
            "",
            "public:",
            "ResourceRegistry() = default;",
            "ResourceRegistry(const ResourceRegistry&) = delete;",
            "ResourceRegistry(ResourceRegistry&&) = delete;",
            "",
            "static ResourceRegistry& instance();",
            "",
            "void register_resource(const std::string& name, void* ctx);",
            f"void register_resource(const std::string& name, {handle} resource);",
            "",
            f"{handle} get_resource(const std::string& name);",
        ],
        "};",
    )
    namespace = _block(
        f"namespace {_NAMESPACE}",
        _join(
            _interface("BinaryResource", _BYTES),
            _interface("StringResource", _TEXT),
            _guarded("_WIN32", [*rc_class, "", "using ResourceInner = RcResource;"]),
            _lazy_declaration("LazyLoadResource", "BinaryResource", _BYTES),
            _lazy_declaration("LazyLoadStringResource", "StringResource", _TEXT),
            void_cast,
            registry,
        ),
    )
    includes = [f"#include <{name}>" for name in ("cstdint", "memory", "string", "unordered_map", "vector")]
    lines = _join(
        ["#ifndef RESOURCE_H", "#define RESOURCE_H"],
        includes,
        ["#ifdef _WIN32", "#include <windows.h>", "#endif"],
        namespace,
        ["#endif //RESOURCE_H"],
    )
    return "\n" + "\n".join(lines) + "\n"


def _rc_get_data() -> List[str]:
    steps: List[Tuple[str, Optional[str]]] = [
        ("const HMODULE module = GetModuleHandle(nullptr);", None),
        ("const HRSRC info = FindResource(module, MAKEINTRESOURCE(id), RT_RCDATA);", "!info"),
        ("const HGLOBAL handle = LoadResource(module, info);", "!handle"),
        ("const void* bytes = LockResource(handle);", "!bytes"),
        ("const DWORD size = SizeofResource(module, info);", "size == 0"),
    ]
    body: List[str] = []
    for statement, failure in steps:
        body.append(statement)
        if failure is not None:
            body.extend(_block(f"if ({failure})", ["return {};"]))
    body.append("const auto* first = static_cast<const uint8_t *>(bytes);")
    body.append("return {first, first + size};")
    return _block(f"{_BYTES} RcResource::get_data()", body)


def _lazy_definition(name: str, data_type: str, load: List[str]) -> List[str]:
    return _join(
        _block(f"{name}::{name}(void* ctx) : inner(ctx)", []),
        _block(
            f"{data_type} {name}::get_data()",
            [*_block("if (!loaded)", [*load, "loaded = true;"]), "return data;"],
        ),
    )


def _build_source() -> str:
    rc = _join(
        _block("RcResource::RcResource(void* ctx)", ["id = *static_cast<int *>(ctx);"]),
        _rc_get_data(),
    )
    handle = "std::shared_ptr<BinaryResource>"
    registry = _join(
        _block(
            "ResourceRegistry& ResourceRegistry::instance()",
            ["static ResourceRegistry shared;", "return shared;"],
        ),
        _block(
            "void ResourceRegistry::register_resource(const std::string& name, void* ctx)",
            ["registry[name] = std::make_shared<RcResource>(ctx);"],
        ),
        _block(
            f"void ResourceRegistry::register_resource(const std::string& name, {handle} resource)",
            ["registry[name] = std::move(resource);"],
        ),
        _block(
            f"{handle} ResourceRegistry::get_resource(const std::string& name)",
            ["return registry[name];"],
        ),
    )
    namespace = _block(
        f"namespace {_NAMESPACE}",
        _join(
            _guarded("_WIN32", rc),
            _lazy_definition("LazyLoadResource", _BYTES, ["data = inner.get_data();"]),
            _lazy_definition(
                "LazyLoadStringResource",
                _TEXT,
                ["const auto raw = inner.get_data();", "data.assign(raw.begin(), raw.end());"],
            ),
            registry,
        ),
    )
    lines = _join(
        ['#include "resource.h"'],
        ["#include <memory>", "#include <utility>"],
        namespace,
    )
    return "\n" + "\n".join(lines) + "\n"


_RESOURCE_HEADER = _build_header()
_RESOURCE_SOURCE = _build_source()


@dataclass(frozen=True)
class ResourceScript:
    """A resource script and the id given to each relative file path."""

    content: str
    file_map: dict[str, int] = field(default_factory=dict)


def build_resource_script(
    files: Iterable[Tuple[str, str]], first_id: int = DEFAULT_FIRST_ID
) -> ResourceScript:
    """Give each file an RCDATA entry, numbering ids from ``first_id``.

    ``files`` yields ``(relative, path)`` pairs; the script names the full
    path and the map is keyed by the relative one.
    """
    lines = []
    file_map: dict[str, int] = {}
    for resource_id, (relative, path) in enumerate(files, start=first_id):
        lines.append(f"{resource_id} RCDATA {path}\n")
        file_map[relative] = resource_id
    return ResourceScript("".join(lines), file_map)


def render_registry(file_map: Mapping[str, int]) -> str:
    """C++ code registering every resource id under its relative path."""
    parts = [
        "// This file is generated by moe-assets.\n",
        "// Do not modify this file.\n\n",
        '#include "resource.h"\n',
        "inline void _regist_all_resources() {\n",
        f"{_INDENT}auto& instance = {_NAMESPACE}::ResourceRegistry::instance();\n",
    ]
    parts.extend(
        f'{_INDENT}instance.register_resource("{name}", {_NAMESPACE}::void_cast({resource_id}));\n'
        for name, resource_id in file_map.items()
    )
    parts.append("}")
    return "".join(parts)


def resource_header() -> str:
    """The C++ header declaring the resource runtime."""
    return _RESOURCE_HEADER


def resource_source() -> str:
    """The C++ source implementing the resource runtime."""
    return _RESOURCE_SOURCE