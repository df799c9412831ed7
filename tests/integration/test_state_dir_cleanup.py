"""Integration tests for cleaning up a real state directory.

These tests build a bbl state directory on disk with LocalFileIO and
run the garbage collector against it.
"""

from pathlib import Path

import pytest
from bblgc.storage.fileio import LocalFileIO
from bblgc.storage.garbage_collector import GarbageCollectionError, GarbageCollector
from bblgc.storage.reporter import RecordingReporter

GENERATED = [
    "bbl-state.json",
    "create-director.sh",
    "delete-director.sh",
    "create-jumpbox.sh",
    "delete-jumpbox.sh",
    "cloud-config/cloud-config.yml",
    "cloud-config/ops.yml",
    "vars/bbl.tfvars",
    "vars/bosh-state.json",
    "vars/director-vars-store.yml",
    "vars/terraform.tfstate",
    "terraform/bbl-template.tf",
    ".terraform/plugins/linux_amd64/terraform-provider-google",
    "bosh-deployment/bosh.yml",
    "jumpbox-deployment/jumpbox.yml",
    "bbl-ops-files/gcp/boshdirector-ops.yml",
]


@pytest.fixture
def state_dir(tmp_path: Path) -> Path:
    """A state directory populated with generated files."""
    fio = LocalFileIO()
    for rel in GENERATED:
        target = tmp_path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        fio.write_file(str(target), "generated")
    return tmp_path


class TestCleanup:
    """End-to-end cleanup against the local filesystem."""

    def test_removes_everything_generated(self, state_dir: Path) -> None:
        """A directory holding only generated files is emptied."""
        reporter = RecordingReporter()

        GarbageCollector(LocalFileIO(), reporter).remove(str(state_dir))

        assert list(state_dir.iterdir()) == []
        assert reporter.messages == []

    def test_keeps_user_files_and_unmanaged_entries(self, state_dir: Path) -> None:
        """User files in managed areas and unrelated files survive."""
        (state_dir / "vars" / "user-managed-file").write_text("mine")
        (state_dir / "terraform" / "override.tf").write_text("mine")
        (state_dir / "README.md").write_text("mine")
        reporter = RecordingReporter()

        result = GarbageCollector(LocalFileIO(), reporter).remove(str(state_dir))

        remaining = sorted(p.relative_to(state_dir).as_posix() for p in state_dir.rglob("*"))
        assert remaining == [
            "README.md",
            "terraform",
            "terraform/override.tf",
            "vars",
            "vars/user-managed-file",
        ]
        assert len(reporter.messages) == 2
        assert "vars/user-managed-file" in reporter.messages[0]
        assert "terraform/override.tf" in reporter.messages[1]
        assert result.preserved == ["vars/user-managed-file", "terraform/override.tf"]

    def test_second_run_is_noop(self, state_dir: Path) -> None:
        """Running twice removes nothing more and reports nothing more."""
        (state_dir / "vars" / "user-managed-file").write_text("mine")
        reporter = RecordingReporter()
        gc = GarbageCollector(LocalFileIO(), reporter)

        gc.remove(str(state_dir))
        result = gc.remove(str(state_dir))

        assert result.skipped is True
        assert len(reporter.messages) == 1
        assert (state_dir / "vars" / "user-managed-file").exists()

    def test_uninitialized_directory_untouched(self, tmp_path: Path) -> None:
        """Without bbl-state.json, bbl-looking files are left alone."""
        (tmp_path / "vars").mkdir()
        (tmp_path / "vars" / "bbl.tfvars").write_text("x")
        (tmp_path / "bosh-deployment").mkdir()

        GarbageCollector(LocalFileIO(), RecordingReporter()).remove(str(tmp_path))

        assert (tmp_path / "vars" / "bbl.tfvars").exists()
        assert (tmp_path / "bosh-deployment").exists()

    def test_dry_run_deletes_nothing(self, state_dir: Path) -> None:
        """Dry-run reports what would go without removing it."""
        (state_dir / "vars" / "user-managed-file").write_text("mine")
        reporter = RecordingReporter()

        result = GarbageCollector(LocalFileIO(dry_run=True), reporter).remove(str(state_dir))

        for rel in GENERATED:
            assert (state_dir / rel).exists()
        assert str(state_dir / "vars" / "bbl.tfvars") in result.removed
        assert str(state_dir / "cloud-config") in result.removed
        assert str(state_dir / "vars") not in result.removed
        assert result.preserved == ["vars/user-managed-file"]
        assert len(reporter.messages) == 1

    def test_managed_area_that_is_a_file(self, state_dir: Path) -> None:
        """A managed area that cannot be listed aborts the cleanup."""
        for child in (state_dir / "terraform").iterdir():
            child.unlink()
        (state_dir / "terraform").rmdir()
        (state_dir / "terraform").write_text("not a directory")

        with pytest.raises(GarbageCollectionError) as exc_info:
            GarbageCollector(LocalFileIO(), RecordingReporter()).remove(str(state_dir))

        assert exc_info.value.path == str(state_dir / "terraform")
        assert (state_dir / "bosh-deployment").exists()
