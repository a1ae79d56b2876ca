"""Normalisation and classification of file names found in bundles."""

from __future__ import annotations

LIBRARY_FOLDER = "library/"
ARCHIVE_PREFIX = "archive:/"
RESOURCES_FOLDER = "resources/"
DEFAULT_RESOURCE_NAME_1 = "unity default resources"
DEFAULT_RESOURCE_NAME_2 = "unity_default_resources"
EDITOR_RESOURCE_NAME = "unity editor resources"
BUILTIN_EXTRA_NAME_1 = "unity builtin extra"
BUILTIN_EXTRA_NAME_2 = "unity_builtin_extra"
ENGINE_GENERATED_F = "0000000000000000f000000000000000"

_ASSEMBLY_IDENTIFIERS = frozenset(
    {
        "Boo",
        "Boo - first pass",
        "CSharp",
        "CSharp - first pass",
        "UnityScript",
        "UnityScript - first pass",
    }
)

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def is_engine_resource(filename: str) -> bool:
    return is_default_resource(filename) or is_editor_resource(filename)


def is_default_resource(filename: str) -> bool:
    return filename in (DEFAULT_RESOURCE_NAME_1, DEFAULT_RESOURCE_NAME_2)


def is_editor_resource(filename: str) -> bool:
    return filename == EDITOR_RESOURCE_NAME


def is_builtin_extra(filename: str) -> bool:
    return filename in (BUILTIN_EXTRA_NAME_1, BUILTIN_EXTRA_NAME_2)


def is_engine_generated_file(filename: str) -> bool:
    return filename == ENGINE_GENERATED_F


def is_project_assembly(assembly: str) -> bool:
    return assembly.startswith(("Assembly - ", "Assembly-"))


def is_assembly_identifier(assembly: str) -> bool:
    return assembly in _ASSEMBLY_IDENTIFIERS


def fix_file_identifier(name: str) -> str:
    """Lower-case a bundle path and reduce it to its canonical file name."""
    name = fix_resource_path(fix_dependency_name(name.translate(_ASCII_LOWER)))
    if is_default_resource(name):
        return DEFAULT_RESOURCE_NAME_1
    if is_builtin_extra(name):
        return BUILTIN_EXTRA_NAME_1
    return name


def fix_dependency_name(dependency: str) -> str:
    for prefix in (LIBRARY_FOLDER, RESOURCES_FOLDER):
        if dependency.startswith(prefix):
            return dependency[len(prefix):]
    return dependency


def fix_resource_path(resource_path: str) -> str:
    if resource_path.startswith(ARCHIVE_PREFIX):
        return resource_path.rpartition("/")[2]
    return resource_path


def fix_assembly_name(assembly: str) -> str:
    if is_assembly_identifier(assembly):
        assembly = "Assembly - " + assembly
    return fix_assembly_endian(assembly)


def fix_assembly_endian(assembly: str) -> str:
    if assembly.endswith(".dll"):
        return assembly[: -len(".dll")]
    return assembly