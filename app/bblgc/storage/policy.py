"""Ownership policy for a bbl state directory.

This module is the single place that enumerates which files and
directories bbl generates inside a state directory. The garbage
collector deletes nothing that is not named here.

The filenames must stay identical to the names the generation side
writes. A name missing here leaves a generated file behind as foreign;
an extra name here deletes a file bbl never owned.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class DeletionMode(str, Enum):
    """How a managed area is cleaned up.

    Attributes:
        WHOLE: Remove the directory recursively without listing it.
        SELECTIVE: Remove known files individually, then remove the
            directory only if nothing foreign was found in it.
    """

    WHOLE = "whole"
    SELECTIVE = "selective"


class Classification(str, Enum):
    """Verdict for a single entry found inside a managed area."""

    KNOWN = "known"
    FOREIGN = "foreign"


def _validate_name(name: str) -> str:
    if not name or name in (".", ".."):
        msg = f"Invalid entry name: {name!r}"
        raise ValueError(msg)
    if "/" in name or "\\" in name:
        msg = f"Entry name must not contain a path separator: {name!r}"
        raise ValueError(msg)
    return name


class ManagedArea(BaseModel):
    """A directory inside the state directory with a known ownership rule.

    Attributes:
        path: Directory name relative to the state directory.
        known_files: Filenames bbl generates inside this directory.
        mode: Deletion mode for the area.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Annotated[str, Field(description="Directory relative to the state directory")]
    known_files: Annotated[
        frozenset[str],
        Field(default_factory=frozenset, description="Generated filenames"),
    ]
    mode: DeletionMode = DeletionMode.SELECTIVE

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Validate that the area is a single directory name."""
        return _validate_name(v)

    @field_validator("known_files")
    @classmethod
    def validate_known_files(cls, v: frozenset[str]) -> frozenset[str]:
        """Validate every known filename."""
        for name in v:
            _validate_name(name)
        return v

    @model_validator(mode="after")
    def validate_mode(self) -> "ManagedArea":
        """Selective areas need a vocabulary, whole areas must not have one."""
        if self.mode == DeletionMode.SELECTIVE and not self.known_files:
            msg = f"Selective area '{self.path}' must list at least one known file"
            raise ValueError(msg)
        if self.mode == DeletionMode.WHOLE and self.known_files:
            msg = f"Whole area '{self.path}' cannot list known files"
            raise ValueError(msg)
        return self

    def classify(self, name: str, is_dir: bool = False) -> Classification:
        """Classify an entry found inside this area.

        Known filenames only ever name files, so a directory is foreign
        even when its name matches.

        Args:
            name: Entry name as returned by a directory listing.
            is_dir: Whether the listed entry is a directory.

        Returns:
            KNOWN if the entry is a generated file of this area, FOREIGN otherwise.
        """
        if name in self.known_files and not is_dir:
            return Classification.KNOWN
        return Classification.FOREIGN


class OwnershipPolicy(BaseModel):
    """Everything bbl owns inside a state directory.

    Attributes:
        state_file: Root state file. Its absence marks the directory as
            never initialized.
        scripts: Helper scripts at the root of the state directory.
        selective_areas: Areas cleaned file by file, in cleanup order.
        owned_directories: Areas removed recursively, in cleanup order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state_file: str = "bbl-state.json"
    scripts: tuple[str, ...] = ()
    selective_areas: tuple[ManagedArea, ...] = ()
    owned_directories: tuple[ManagedArea, ...] = ()

    @field_validator("state_file")
    @classmethod
    def validate_state_file(cls, v: str) -> str:
        """Validate the state filename."""
        return _validate_name(v)

    @field_validator("scripts")
    @classmethod
    def validate_scripts(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Validate every script filename."""
        for name in v:
            _validate_name(name)
        return v

    @model_validator(mode="after")
    def validate_areas(self) -> "OwnershipPolicy":
        """Validate area modes and reject duplicate top-level entries."""
        for area in self.selective_areas:
            if area.mode != DeletionMode.SELECTIVE:
                msg = f"Area '{area.path}' is listed as selective but has mode {area.mode.value}"
                raise ValueError(msg)
        for area in self.owned_directories:
            if area.mode != DeletionMode.WHOLE:
                msg = f"Area '{area.path}' is listed as owned but has mode {area.mode.value}"
                raise ValueError(msg)

        names = [self.state_file, *self.scripts]
        names += [a.path for a in self.selective_areas]
        names += [a.path for a in self.owned_directories]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            msg = f"Entries cannot be listed more than once: {sorted(duplicates)}"
            raise ValueError(msg)
        return self


DEFAULT_POLICY = OwnershipPolicy(
    state_file="bbl-state.json",
    scripts=(
        "create-director.sh",
        "delete-director.sh",
        "create-jumpbox.sh",
        "delete-jumpbox.sh",
    ),
    selective_areas=(
        ManagedArea(
            path="cloud-config",
            known_files=frozenset({"cloud-config.yml", "ops.yml"}),
        ),
        ManagedArea(
            path="vars",
            known_files=frozenset(
                {
                    "bbl.tfvars",
                    "bosh-state.json",
                    "cloud-config-vars.yml",
                    "director-vars-file.yml",
                    "director-vars-store.yml",
                    "jumpbox-state.json",
                    "jumpbox-vars-file.yml",
                    "jumpbox-vars-store.yml",
                    "terraform.tfstate",
                    "terraform.tfstate.backup",
                }
            ),
        ),
        ManagedArea(
            path="terraform",
            known_files=frozenset({"bbl-template.tf"}),
        ),
    ),
    owned_directories=(
        ManagedArea(path=".terraform", mode=DeletionMode.WHOLE),
        ManagedArea(path="bosh-deployment", mode=DeletionMode.WHOLE),
        ManagedArea(path="jumpbox-deployment", mode=DeletionMode.WHOLE),
        ManagedArea(path="bbl-ops-files", mode=DeletionMode.WHOLE),
    ),
)
