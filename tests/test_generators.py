import pytest

from moeassets.files import FileEntry
from moeassets.generators import (
    ResourceScript,
    build_resource_script,
    render_registry,
    resource_header,
    resource_source,
)


def _parse_script(content):
    ids = {}
    for line in content.splitlines():
        resource_id, kind, path = line.split(" ", 2)
        assert kind == "RCDATA"
        ids[path] = int(resource_id)
    return ids


def test_script_numbers_from_one_hundred():
    files = [FileEntry("a.png", "root/a.png"), FileEntry("b/c.txt", "root/b/c.txt")]
    script = build_resource_script(files)
    assert script.content == "100 RCDATA root/a.png\n101 RCDATA root/b/c.txt\n"
    assert script.file_map == {"a.png": 100, "b/c.txt": 101}


def test_script_with_custom_first_id():
    files = [("x", "dir/x"), ("y", "dir/y"), ("z", "dir/z")]
    script = build_resource_script(files, 7)
    assert sorted(script.file_map.values()) == [7, 8, 9]


def test_script_round_trip_between_content_and_map():
    files = [FileEntry(f"f{n}.bin", f"in/f{n}.bin") for n in range(5)]
    script = build_resource_script(files)
    by_path = _parse_script(script.content)
    assert {path: by_path[path] for _, path in files} == {
        path: script.file_map[rel] for rel, path in files
    }


def test_empty_script():
    script = build_resource_script([])
    assert script == ResourceScript("", {})


def test_registry_contains_each_entry():
    text = render_registry({"img/a.png": 100, "b.txt": 101})
    assert (
        '    instance.register_resource("img/a.png", moefx::resource::void_cast(100));\n'
        in text
    )
    assert (
        '    instance.register_resource("b.txt", moefx::resource::void_cast(101));\n'
        in text
    )
    assert text.count("instance.register_resource(") == 2


def test_registry_frame():
    text = render_registry({})
    assert text.startswith(
        "// This file is generated by moe-assets.\n// Do not modify this file.\n\n"
    )
    assert '#include "resource.h"\n' in text
    assert "inline void _regist_all_resources() {\n" in text
    assert text.endswith(
        "    auto& instance = moefx::resource::ResourceRegistry::instance();\n}"
    )


@pytest.mark.parametrize("count", [1, 3, 10])
def test_registry_line_count_matches_map(count):
    mapping = {f"r{n}": 100 + n for n in range(count)}
    lines = render_registry(mapping).split("\n")
    assert sum("register_resource" in line for line in lines) == count


def test_header_guard():
    header = resource_header()
    assert header.startswith("\n#ifndef RESOURCE_H\n#define RESOURCE_H\n")
    assert header.endswith("#endif //RESOURCE_H\n")
    assert "class ResourceRegistry {" in header


def test_source_includes_header_and_defines_registry():
    source = resource_source()
    assert source.startswith('\n#include "resource.h"\n')
    assert "ResourceRegistry& ResourceRegistry::instance() {" in source
    assert source.endswith("}\n")