"""Tests for assets module."""

import pytest
from ewiki.assets import STATIC_DIRS, get_resource_dir, get_templates_dir


class TestGetResourceDir:
    """Tests for get_resource_dir()."""

    def test__bundle_root__exists(self) -> None:
        assert get_resource_dir().is_dir()

    def test__templates__are_bundled(self) -> None:
        templates = get_templates_dir()

        for name in ("header.html", "content.html", "footer.html"):
            assert (templates / name).is_file()

    def test__static_dirs__include_core_assets(self) -> None:
        for name in ("css", "img", "js"):
            assert name in STATIC_DIRS
            assert get_resource_dir(name).is_dir()

    def test__missing_bundle__raises_file_not_found_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should raise FileNotFoundError when the bundle doesn't exist."""

        class FakeTraversable:
            def is_dir(self) -> bool:
                return False

            def joinpath(self, name: str) -> "FakeTraversable":
                return self

        monkeypatch.setattr("ewiki.assets.files", lambda _: FakeTraversable())

        with pytest.raises(FileNotFoundError, match="Bundled resources not found"):
            get_resource_dir("css")
