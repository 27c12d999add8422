"""Command-line entry point: build a compiled resource object from a folder."""

from __future__ import annotations

import sys
from typing import Sequence

from moeassets.args import ArgumentError, parse_args
from moeassets.files import clear_folder, concat_path, create_folder, exists, list_files, write_file
from moeassets.generators import (
    build_resource_script,
    render_registry,
    resource_header,
    resource_source,
)
from moeassets.runner import command

BUILD_DIR = "build"
RES_DIR = "res"


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the registry sources and compile the resource script with windres."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except ArgumentError:
        print("Invalid arguments", file=sys.stderr)
        return 1

    output = args.output_path
    clear_folder(output, BUILD_DIR)

    script = build_resource_script(list_files(args.input_path))

    build_path = concat_path(output, BUILD_DIR)
    res_path = concat_path(output, BUILD_DIR, RES_DIR)
    if not exists(output, BUILD_DIR):
        create_folder(output, BUILD_DIR)
    if not exists(build_path, RES_DIR):
        create_folder(build_path, RES_DIR)

    write_file(build_path, "resource.h", resource_header())
    write_file(build_path, "resource.cpp", resource_source())
    write_file(build_path, "res.h", render_registry(script.file_map))
    write_file(res_path, "rc.rc", script.content)

    result = (
        command("windres")
        .add_arg(concat_path(res_path, "rc.rc"))
        .add_arg("-O", "coff")
        .add_arg("-o", concat_path(res_path, "rc.o"))
        .run()
    )
    if result != 0:
        print("Failed to compile resource file", file=sys.stderr)
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())