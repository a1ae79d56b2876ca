import pytest

from assetbundle import filenameutils as fu


@pytest.mark.parametrize(
    "name", ["unity default resources", "unity_default_resources", "unity editor resources"]
)
def test_engine_resources(name):
    assert fu.is_engine_resource(name)


def test_default_and_editor_distinct():
    assert fu.is_default_resource("unity_default_resources")
    assert not fu.is_default_resource("unity editor resources")
    assert fu.is_editor_resource("unity editor resources")
    assert not fu.is_engine_resource("unity builtin extra")


def test_builtin_extra():
    assert fu.is_builtin_extra("unity builtin extra")
    assert fu.is_builtin_extra("unity_builtin_extra")
    assert not fu.is_builtin_extra("unity default resources")


def test_engine_generated():
    assert fu.is_engine_generated_file("0000000000000000f000000000000000")
    assert not fu.is_engine_generated_file("0000000000000000f000000000000001")


def test_assembly_identifier():
    assert fu.is_assembly_identifier("CSharp - first pass")
    assert not fu.is_assembly_identifier("csharp")


def test_project_assembly():
    assert fu.is_project_assembly("Assembly-CSharp")
    assert fu.is_project_assembly("Assembly - Boo")
    assert not fu.is_project_assembly("UnityEngine")


def test_fix_dependency_name():
    assert fu.fix_dependency_name("library/unity default resources") == "unity default resources"
    assert fu.fix_dependency_name("resources/unity_builtin_extra") == "unity_builtin_extra"
    assert fu.fix_dependency_name("other/file") == "other/file"


def test_fix_resource_path():
    assert fu.fix_resource_path("archive:/cab-one/cab-two") == "cab-two"
    assert fu.fix_resource_path("plain/name") == "plain/name"


def test_fix_file_identifier_lowercases_and_strips_archive():
    assert fu.fix_file_identifier("archive:/CAB-Dir/CAB-File") == "cab-file"


def test_fix_file_identifier_canonical_names():
    assert fu.fix_file_identifier("Library/Unity_Default_Resources") == "unity default resources"
    assert fu.fix_file_identifier("Resources/unity_builtin_extra") == "unity builtin extra"


def test_fix_file_identifier_idempotent():
    once = fu.fix_file_identifier("Library/Some File")
    assert fu.fix_file_identifier(once) == once


def test_fix_assembly_name():
    assert fu.fix_assembly_name("CSharp") == "Assembly - CSharp"
    assert fu.fix_assembly_name("UnityEngine.dll") == "UnityEngine"


def test_fix_assembly_endian():
    assert fu.fix_assembly_endian("Mono.dll") == "Mono"
    assert fu.fix_assembly_endian("Mono") == "Mono"