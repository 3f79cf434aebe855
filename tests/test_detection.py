"""
Tests for detection — marker walk and package manager classification.
"""

from pathlib import Path
from unittest.mock import patch

from proxyopts.core.models.options import PackageManagerKind
from proxyopts.core.services.detection import detect_package_manager, find_up


class TestFindUp:
    def test_marker_in_start_dir(self, tmp_path: Path):
        (tmp_path / ".pnp.cjs").write_text("")
        assert find_up([".pnp.cjs"], tmp_path) == tmp_path.resolve()

    def test_marker_in_ancestor(self, yarn_project_dir: Path):
        root = yarn_project_dir.parent.parent
        assert find_up([".yarnrc.yml"], yarn_project_dir) == root.resolve()

    def test_nearest_wins(self, tmp_path: Path):
        inner = tmp_path / "a" / "b"
        inner.mkdir(parents=True)
        (tmp_path / ".marker-xyz").write_text("")
        (tmp_path / "a" / ".marker-xyz").write_text("")
        assert find_up([".marker-xyz"], inner) == (tmp_path / "a").resolve()

    def test_directory_marker(self, tmp_path: Path):
        (tmp_path / ".yarn").mkdir()
        assert find_up([".yarn"], tmp_path) == tmp_path.resolve()

    def test_reaches_root_without_match(self, tmp_path: Path):
        assert find_up([".no-such-marker-7f3a"], tmp_path) is None

    def test_unresolvable_start_dir_falls_back(self, tmp_path: Path):
        (tmp_path / ".yarnrc.yml").write_text("")
        with patch("pathlib.Path.resolve", side_effect=RuntimeError("Symlink loop")):
            assert find_up([".yarnrc.yml"], tmp_path) == tmp_path

    def test_symlink_loop_never_raises(self, tmp_path: Path):
        loop = tmp_path / "loop"
        loop.symlink_to(loop)
        assert find_up([".no-such-marker-7f3a"], loop) is None

    def test_probe_errors_count_as_absent(self, tmp_path: Path):
        with patch("pathlib.Path.exists", side_effect=PermissionError("denied")):
            assert find_up([".yarnrc.yml"], tmp_path) is None


class TestDetectPackageManager:
    def test_plain_npm_project(self, project_dir: Path):
        assert detect_package_manager(project_dir) is PackageManagerKind.DEFAULT

    def test_yarnrc_at_workspace_root(self, yarn_project_dir: Path):
        assert detect_package_manager(yarn_project_dir) is PackageManagerKind.ALTERNATE

    def test_yarn_dir_marker(self, project_dir: Path):
        (project_dir / ".yarn").mkdir()
        assert detect_package_manager(project_dir) is PackageManagerKind.ALTERNATE

    def test_pnp_marker(self, project_dir: Path):
        (project_dir / ".pnp.cjs").write_text("")
        assert detect_package_manager(project_dir) is PackageManagerKind.ALTERNATE

    def test_yarn_lock_alone_is_not_a_marker(self, project_dir: Path):
        (project_dir / "yarn.lock").write_text("")
        assert detect_package_manager(project_dir) is PackageManagerKind.DEFAULT

    def test_empty_marker_list_disables_detection(self, yarn_project_dir: Path):
        assert detect_package_manager(yarn_project_dir, markers=[]) is PackageManagerKind.DEFAULT

    def test_custom_markers(self, project_dir: Path):
        (project_dir / "yarn.lock").write_text("")
        kind = detect_package_manager(project_dir, markers=["yarn.lock"])
        assert kind is PackageManagerKind.ALTERNATE
