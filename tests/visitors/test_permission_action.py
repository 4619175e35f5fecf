"""Unit tests for the permission_action module."""

from compact_path_tree.visitors.permission_action import PermissionAction


def test_permission_action_enum():
    assert PermissionAction.WARN == "warn"
    assert PermissionAction.IGNORE == "ignore"
    assert PermissionAction.RAISE == "raise"

    assert PermissionAction("warn") == PermissionAction.WARN
    assert PermissionAction("ignore") == PermissionAction.IGNORE
    assert PermissionAction("raise") == PermissionAction.RAISE


def test_permission_action_comparison():
    assert "ignore" == PermissionAction.IGNORE
    assert PermissionAction.IGNORE != "raise"
    assert PermissionAction.RAISE != "warn"
